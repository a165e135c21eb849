"""
EVPlanner - Map scene graph

Holds the placed icons and the cables between them. Connections carry
copies of their endpoints' position and name; every move or rename
rewrites those copies from the icon list so they never drift.
"""
import uuid
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from evplanner.editor.errors import EditorError, UnknownIconError
from evplanner.editor.icon_types import IconType, get_icon_type
from evplanner.schemas.map import MapConnection, MapIcon

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Collision-free id for icons and connections."""
    return uuid.uuid4().hex


class Scene:
    """Icons and connections of one map, in placement order."""

    def __init__(
        self,
        icons: Optional[Sequence[MapIcon]] = None,
        connections: Optional[Sequence[MapConnection]] = None
    ):
        self.icons: List[MapIcon] = list(icons or [])
        self.connections: List[MapConnection] = list(connections or [])

    def __len__(self) -> int:
        return len(self.icons)

    def get_icon(self, icon_id: str) -> MapIcon:
        for icon in self.icons:
            if icon.id == icon_id:
                return icon
        raise UnknownIconError(f"Icon {icon_id} is not on the map")

    def has_icon(self, icon_id: str) -> bool:
        return any(icon.id == icon_id for icon in self.icons)

    def default_name(self, icon_type: IconType) -> str:
        """'{type name} {n}' where n counts existing icons of that type."""
        count = sum(1 for icon in self.icons if icon.type == icon_type.id)
        return f"{icon_type.name} {count + 1}"

    def add_icon(self, type_id: str, position: Tuple[float, float]) -> MapIcon:
        icon_type = get_icon_type(type_id)
        if icon_type.is_connector:
            raise EditorError(f"'{icon_type.name}' connects icons and cannot be placed")

        icon = MapIcon(
            id=new_id(),
            type=icon_type.id,
            position=[position[0], position[1]],
            name=self.default_name(icon_type),
        )
        self.icons.append(icon)
        logger.debug(f"Placed {icon.name} at {icon.position}")
        return icon

    def move_icon(self, icon_id: str, position: Tuple[float, float]) -> MapIcon:
        icon = self.get_icon(icon_id)
        icon.position = [position[0], position[1]]
        self._refresh_endpoints(icon)
        return icon

    def rename_icon(self, icon_id: str, name: str) -> MapIcon:
        icon = self.get_icon(icon_id)
        icon.name = name
        self._refresh_endpoints(icon)
        return icon

    def remove_icon(self, icon_id: str) -> List[MapConnection]:
        """Remove an icon together with every connection attached to it."""
        icon = self.get_icon(icon_id)
        self.icons.remove(icon)

        removed = [c for c in self.connections if icon_id in (c.source, c.target)]
        if removed:
            self.connections = [c for c in self.connections if c not in removed]
            logger.debug(f"Removed {len(removed)} connections attached to {icon.name}")
        return removed

    def connect(self, source_id: str, target_id: str) -> MapConnection:
        if source_id == target_id:
            raise EditorError("A connection needs two different icons")
        source = self.get_icon(source_id)
        target = self.get_icon(target_id)

        connection = MapConnection(
            id=new_id(),
            source=source.id,
            target=target.id,
            source_position=list(source.position),
            target_position=list(target.position),
            source_name=source.name,
            target_name=target.name,
        )
        self.connections.append(connection)
        return connection

    def remove_connection(self, connection_id: str) -> MapConnection:
        for connection in self.connections:
            if connection.id == connection_id:
                self.connections.remove(connection)
                return connection
        raise EditorError(f"Connection {connection_id} is not on the map")

    def clear_icons(self) -> None:
        self.icons = []
        self.connections = []

    def clear_connections(self) -> None:
        self.connections = []

    def endpoints(self, connection: MapConnection) -> Tuple[MapIcon, MapIcon]:
        """Resolve a connection's endpoints against the current icons."""
        return self.get_icon(connection.source), self.get_icon(connection.target)

    def dangling_connections(self) -> List[MapConnection]:
        """Connections whose endpoints are missing from the icon list."""
        ids = {icon.id for icon in self.icons}
        return [c for c in self.connections if c.source not in ids or c.target not in ids]

    def counts_by_type(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for icon in self.icons:
            counts[icon.type] = counts.get(icon.type, 0) + 1
        return counts

    def to_payload(self) -> dict:
        """Wire form of the scene: {'icons': [...], 'connections': [...]}."""
        return {
            "icons": [icon.model_dump(by_alias=True) for icon in self.icons],
            "connections": [c.model_dump(by_alias=True) for c in self.connections],
        }

    def _refresh_endpoints(self, icon: MapIcon) -> None:
        for connection in self.connections:
            if connection.source == icon.id:
                connection.source_position = list(icon.position)
                connection.source_name = icon.name
            if connection.target == icon.id:
                connection.target_position = list(icon.position)
                connection.target_name = icon.name
