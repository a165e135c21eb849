"""
EVPlanner - Map editor session

Headless counterpart of the map planning screen: palette drag-and-drop,
two-click cable mode, and save/load/delete through the maps API.

Placement states:

    IDLE --begin_drag--> DRAGGING_TO_PLACE --drop/abort_drag--> IDLE
    IDLE --start_cable_mode--> CABLE_SELECT_FIRST
    CABLE_SELECT_FIRST --click_icon--> CABLE_SELECT_SECOND
    CABLE_SELECT_SECOND --click_icon(other)--> IDLE   (connection created)
    CABLE_SELECT_* --cancel--> IDLE

Moving, renaming and removing icons work in any state.
"""
import logging
from enum import Enum
from typing import List, Optional, Tuple

from evplanner.editor.errors import (
    InvalidTransition,
    SaveRejected,
    UnsavedChangesError,
)
from evplanner.editor.icon_types import IconType, get_icon_type
from evplanner.editor.scene import Scene
from evplanner.editor.tiles import TileLayerConfig, tile_layer_config
from evplanner.editor.viewport import Viewport
from evplanner.schemas.map import MapConnection, MapIcon, MapLayer, MapResponse, MapSummary
from evplanner.services.geocoding import GeocodingClient, GeocodingError
from evplanner.services.maps_client import MapsApiError, MapsClient

logger = logging.getLogger(__name__)

# Cable mode can only be started once there is something to connect
MIN_ICONS_FOR_CABLES = 2


class PlacementState(str, Enum):
    IDLE = "idle"
    DRAGGING_TO_PLACE = "dragging-to-place"
    CABLE_SELECT_FIRST = "cable-select-first"
    CABLE_SELECT_SECOND = "cable-select-second"


CABLE_STATES = (PlacementState.CABLE_SELECT_FIRST, PlacementState.CABLE_SELECT_SECOND)


class MapEditor:
    """
    One operator's editing session.

    Transient interaction state (drag, pending cable source) stays local;
    only `save()` sends the scene to the server.
    """

    def __init__(
        self,
        client: Optional[MapsClient] = None,
        geocoder: Optional[GeocodingClient] = None,
        viewport: Optional[Viewport] = None
    ):
        self.client = client or MapsClient()
        self.geocoder = geocoder or GeocodingClient()
        self.viewport = viewport or Viewport()

        self.name = ""
        self.layer = MapLayer.SATELLITE
        self.scene = Scene()

        self.state = PlacementState.IDLE
        self.dragged_type: Optional[IconType] = None
        self.pending_source: Optional[str] = None

        self.map_id: Optional[int] = None
        self.saved_maps: List[MapSummary] = []
        self.dirty = False
        self.last_error: Optional[str] = None

    # ============================================================
    # Scene accessors
    # ============================================================

    @property
    def icons(self) -> List[MapIcon]:
        return self.scene.icons

    @property
    def connections(self) -> List[MapConnection]:
        return self.scene.connections

    @property
    def center(self) -> Tuple[float, float]:
        return self.viewport.center

    def set_center(self, lat: float, lng: float) -> None:
        self.viewport.center = (lat, lng)
        self.dirty = True

    def set_layer(self, layer) -> None:
        self.layer = MapLayer(layer)
        self.dirty = True

    @property
    def tile_layer(self) -> TileLayerConfig:
        return tile_layer_config(self.layer)

    @property
    def can_start_cable_mode(self) -> bool:
        return self.state == PlacementState.IDLE and len(self.scene) >= MIN_ICONS_FOR_CABLES

    # ============================================================
    # Drag-and-drop placement
    # ============================================================

    def begin_drag(self, type_id: str) -> None:
        """Start dragging a palette entry. The connector entry starts cable mode instead."""
        icon_type = get_icon_type(type_id)
        if icon_type.is_connector:
            self.start_cable_mode()
            return

        self._require_state(PlacementState.IDLE, "start dragging")
        self.state = PlacementState.DRAGGING_TO_PLACE
        self.dragged_type = icon_type

    def drop(self, client_x: float, client_y: float) -> MapIcon:
        """Drop the dragged icon at a page position and place it on the map."""
        self._require_state(PlacementState.DRAGGING_TO_PLACE, "drop")
        position = self.viewport.client_to_latlng(client_x, client_y)
        icon = self.scene.add_icon(self.dragged_type.id, position)
        self._reset_interaction()
        self.dirty = True
        logger.info(f"Placed '{icon.name}' at ({position[0]:.5f}, {position[1]:.5f})")
        return icon

    def abort_drag(self) -> None:
        self._require_state(PlacementState.DRAGGING_TO_PLACE, "abort a drag")
        self._reset_interaction()

    def place_at_center(self, type_id: str) -> MapIcon:
        """Click-to-place: put an icon at the current map center."""
        self._require_state(PlacementState.IDLE, "place an icon")
        icon = self.scene.add_icon(type_id, self.viewport.center)
        self.dirty = True
        return icon

    # ============================================================
    # Cable mode
    # ============================================================

    def start_cable_mode(self) -> None:
        """Enter cable mode from the palette or the explicit control."""
        self._require_state(PlacementState.IDLE, "start cable mode")
        if len(self.scene) < MIN_ICONS_FOR_CABLES:
            raise InvalidTransition("Place at least two icons before adding cables")
        self.state = PlacementState.CABLE_SELECT_FIRST
        self.pending_source = None

    def connect_from(self, icon_id: str) -> None:
        """An icon's 'Connect' action: enter cable mode and wait for the first pick."""
        self.scene.get_icon(icon_id)
        self._require_state(PlacementState.IDLE, "start cable mode")
        self.state = PlacementState.CABLE_SELECT_FIRST
        self.pending_source = None

    def click_icon(self, icon_id: str) -> Optional[MapConnection]:
        """
        Handle a click on a placed icon.

        Returns the new connection when the click completes a cable,
        otherwise None. Clicks outside cable mode are ignored, as is a
        second click on the already selected icon.
        """
        if self.state == PlacementState.CABLE_SELECT_FIRST:
            self.scene.get_icon(icon_id)
            self.pending_source = icon_id
            self.state = PlacementState.CABLE_SELECT_SECOND
            return None

        if self.state == PlacementState.CABLE_SELECT_SECOND:
            if icon_id == self.pending_source:
                return None
            connection = self.scene.connect(self.pending_source, icon_id)
            self._reset_interaction()
            self.dirty = True
            logger.info(f"Connected '{connection.source_name}' to '{connection.target_name}'")
            return connection

        return None

    def cancel(self) -> None:
        """Leave cable mode without creating anything."""
        if self.state not in CABLE_STATES:
            raise InvalidTransition(f"Nothing to cancel in state '{self.state.value}'")
        self._reset_interaction()

    # ============================================================
    # Editing placed icons (available in every state)
    # ============================================================

    def move_icon(self, icon_id: str, lat: float, lng: float) -> MapIcon:
        """Drag-end on a placed icon."""
        icon = self.scene.move_icon(icon_id, (lat, lng))
        self.dirty = True
        return icon

    def rename_icon(self, icon_id: str, name: str) -> MapIcon:
        icon = self.scene.rename_icon(icon_id, name)
        self.dirty = True
        return icon

    def remove_icon(self, icon_id: str) -> List[MapConnection]:
        """Remove an icon and its cables. Returns the removed cables."""
        removed = self.scene.remove_icon(icon_id)
        if self.pending_source == icon_id:
            self._reset_interaction()
        self.dirty = True
        return removed

    def remove_connection(self, connection_id: str) -> None:
        self.scene.remove_connection(connection_id)
        self.dirty = True

    def clear_icons(self) -> None:
        self.scene.clear_icons()
        self._reset_interaction()
        self.dirty = True

    def clear_connections(self) -> None:
        self.scene.clear_connections()
        self.dirty = True

    # ============================================================
    # Location search
    # ============================================================

    async def search_location(self, query: str) -> Optional[Tuple[float, float]]:
        """
        Center the map on a geocoded place. On failure the center is
        left unchanged and `last_error` describes the problem.
        """
        query = query.strip()
        if not query:
            return None

        try:
            position = await self.geocoder.lookup(query)
        except GeocodingError:
            self.last_error = "Error searching for location. Please try again."
            return None

        if position is None:
            self.last_error = "Location not found. Please try a different city or zip code."
            return None

        self.set_center(*position)
        self.last_error = None
        return position

    # ============================================================
    # Persistence
    # ============================================================

    def payload(self) -> dict:
        """Body sent when saving."""
        return {
            "name": self.name.strip(),
            "center": list(self.viewport.center),
            "layer": self.layer.value,
            **self.scene.to_payload(),
        }

    async def save(self) -> Optional[MapResponse]:
        """
        Save the scene as a new map.

        Raises SaveRejected when the name is blank or no icon is placed.
        Returns None (with `last_error` set) when the server call fails.
        """
        if not self.name.strip():
            raise SaveRejected("Enter a map name before saving")
        if not self.scene.icons:
            raise SaveRejected("Place at least one icon before saving")
        dangling = self.scene.dangling_connections()
        if dangling:
            raise SaveRejected(f"{len(dangling)} connections reference icons that are not on the map")

        try:
            saved = await self.client.create_map(self.payload())
        except MapsApiError:
            self.last_error = "Error saving map. Please try again."
            return None

        self.map_id = saved.id
        self.dirty = False
        self.last_error = None
        logger.info(f"Map '{saved.name}' saved (id={saved.id})")
        await self.refresh_saved_maps()
        return saved

    async def refresh_saved_maps(self) -> List[MapSummary]:
        try:
            self.saved_maps = await self.client.list_maps()
        except MapsApiError:
            self.last_error = "Error loading maps."
        return self.saved_maps

    async def load(self, map_id: int, confirm_discard: bool = False) -> Optional[MapResponse]:
        """
        Replace the whole local scene with a saved map.

        Unsaved local edits are only discarded when `confirm_discard` is set.
        """
        if self.dirty and not confirm_discard:
            raise UnsavedChangesError("Loading will discard unsaved changes")

        try:
            saved = await self.client.get_map(map_id)
        except MapsApiError:
            self.last_error = "Error loading map. Please try again."
            return None

        self.name = saved.name
        self.set_center(saved.center[0], saved.center[1])
        self.layer = saved.layer
        self.scene = Scene(saved.icons, saved.connections)
        self._reset_interaction()
        self.map_id = saved.id
        self.saved_maps = []
        self.dirty = False
        self.last_error = None
        logger.info(f"Loaded map '{saved.name}' (id={saved.id})")
        return saved

    async def delete(self, map_id: int, confirmed: bool = False) -> bool:
        """Delete a saved map. Without confirmation nothing happens."""
        if not confirmed:
            return False

        try:
            await self.client.delete_map(map_id)
        except MapsApiError:
            self.last_error = "Error deleting map. Please try again."
            return False

        if self.map_id == map_id:
            self.map_id = None
        await self.refresh_saved_maps()
        return True

    # ============================================================
    # Internals
    # ============================================================

    def _require_state(self, expected: PlacementState, action: str) -> None:
        if self.state != expected:
            raise InvalidTransition(f"Cannot {action} while in state '{self.state.value}'")

    def _reset_interaction(self) -> None:
        self.state = PlacementState.IDLE
        self.dragged_type = None
        self.pending_source = None

