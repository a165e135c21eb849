"""
EVPlanner - Map viewport projection

Converts between screen positions inside the map container and
geographic coordinates using spherical Web Mercator (256px tiles),
the projection used by the slippy-map tile servers.
"""
import math
from dataclasses import dataclass
from typing import Tuple

TILE_SIZE = 256
MAX_LATITUDE = 85.0511287798

# Geographic center of the contiguous USA
DEFAULT_CENTER = (39.8283, -98.5795)
DEFAULT_ZOOM = 13


@dataclass
class Viewport:
    """
    The visible map area.

    `left`/`top` are the container's offset on the page so that
    client (page) coordinates from a drop event can be converted.
    """
    center: Tuple[float, float] = DEFAULT_CENTER
    zoom: float = DEFAULT_ZOOM
    width: float = 800
    height: float = 500
    left: float = 0
    top: float = 0

    @property
    def world_size(self) -> float:
        return TILE_SIZE * 2 ** self.zoom

    def project(self, lat: float, lng: float) -> Tuple[float, float]:
        """Geographic coordinate to world pixel coordinate at the current zoom."""
        lat = max(min(lat, MAX_LATITUDE), -MAX_LATITUDE)
        sin = math.sin(math.radians(lat))
        x = (lng + 180.0) / 360.0 * self.world_size
        y = (0.5 - math.log((1 + sin) / (1 - sin)) / (4 * math.pi)) * self.world_size
        return x, y

    def unproject(self, x: float, y: float) -> Tuple[float, float]:
        """World pixel coordinate to geographic coordinate."""
        lng = x / self.world_size * 360.0 - 180.0
        n = math.pi * (1 - 2 * y / self.world_size)
        lat = math.degrees(math.atan(math.sinh(n)))
        return lat, lng

    def container_point_to_latlng(self, x: float, y: float) -> Tuple[float, float]:
        """Point relative to the container's top-left corner to [lat, lng]."""
        cx, cy = self.project(*self.center)
        return self.unproject(cx + x - self.width / 2, cy + y - self.height / 2)

    def latlng_to_container_point(self, lat: float, lng: float) -> Tuple[float, float]:
        cx, cy = self.project(*self.center)
        px, py = self.project(lat, lng)
        return px - cx + self.width / 2, py - cy + self.height / 2

    def client_to_latlng(self, client_x: float, client_y: float) -> Tuple[float, float]:
        """Page coordinate (e.g. a drop event) to [lat, lng]."""
        return self.container_point_to_latlng(client_x - self.left, client_y - self.top)
