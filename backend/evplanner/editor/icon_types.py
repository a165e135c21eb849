"""
EVPlanner - Infrastructure icon catalog
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from evplanner.editor.errors import UnknownIconTypeError


@dataclass(frozen=True)
class IconType:
    """A kind of infrastructure that can be placed on a map."""
    id: str
    name: str
    glyph: str
    color: str
    is_connector: bool = False


ICON_TYPES: Tuple[IconType, ...] = (
    IconType("solar", "Solar PV", "☀️", "#FFD700"),
    IconType("battery", "Battery Storage", "🔋", "#32CD32"),
    IconType("ev-demand", "EV Demand", "🚗", "#FF6B6B"),
    IconType("diesel-gen", "Diesel Generator", "⛽", "#FF4500"),
    IconType("gas-gen", "Gas Generator", "🏭", "#32CD32"),
    IconType("linear-gen", "Linear Generator", "📦", "#9370DB"),
    IconType("boiler", "Boiler", "🔥", "#DC143C"),
    IconType("elec-chiller", "Elec. Chiller", "❄️", "#4169E1"),
    # Not placeable: selecting it starts cable mode
    IconType("cable", "Cable", "🔌", "#696969", is_connector=True),
)

_BY_ID: Dict[str, IconType] = {t.id: t for t in ICON_TYPES}


def get_icon_type(type_id: str) -> IconType:
    try:
        return _BY_ID[type_id]
    except KeyError:
        raise UnknownIconTypeError(f"Unknown icon type: {type_id}") from None


def placeable_types() -> Tuple[IconType, ...]:
    return tuple(t for t in ICON_TYPES if not t.is_connector)
