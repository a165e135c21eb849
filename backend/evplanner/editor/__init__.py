"""
EVPlanner - Headless map editor
"""
from evplanner.editor.errors import (
    EditorError,
    InvalidTransition,
    SaveRejected,
    UnknownIconError,
    UnknownIconTypeError,
    UnsavedChangesError,
)
from evplanner.editor.icon_types import ICON_TYPES, IconType, get_icon_type
from evplanner.editor.scene import Scene
from evplanner.editor.session import MapEditor, PlacementState
from evplanner.editor.viewport import Viewport

__all__ = [
    "EditorError",
    "InvalidTransition",
    "SaveRejected",
    "UnknownIconError",
    "UnknownIconTypeError",
    "UnsavedChangesError",
    "ICON_TYPES",
    "IconType",
    "get_icon_type",
    "Scene",
    "MapEditor",
    "PlacementState",
    "Viewport",
]
