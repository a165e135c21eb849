"""
EVPlanner - Map editor exceptions
"""


class EditorError(Exception):
    """Base class for map editor failures."""


class InvalidTransition(EditorError):
    """The requested interaction is not allowed in the current state."""


class UnknownIconTypeError(EditorError):
    """Icon type id is not in the catalog."""


class UnknownIconError(EditorError):
    """Icon id is not part of the current scene."""


class SaveRejected(EditorError):
    """The scene does not meet the requirements for saving."""


class UnsavedChangesError(EditorError):
    """Loading would discard local edits that were not confirmed."""
