"""
EVPlanner - Tile layer catalog
"""
from dataclasses import dataclass
from typing import Optional

from evplanner.schemas.map import MapLayer

ESRI_IMAGERY_URL = "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}"
ESRI_ATTRIBUTION = (
    '&copy; <a href="https://www.esri.com/">Esri</a> &mdash; Source: Esri, i-cubed, USDA, USGS, '
    "AEX, GeoEye, Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
)
OSM_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
LABELS_URL = (
    "https://server.arcgisonline.com/ArcGIS/rest/services/Reference/"
    "World_Boundaries_and_Places/MapServer/tile/{z}/{y}/{x}"
)


@dataclass(frozen=True)
class TileLayerConfig:
    url: str
    attribution: str
    # Drawn on top of the base layer (place names for hybrid)
    overlay_url: Optional[str] = None


TILE_LAYERS = {
    MapLayer.SATELLITE: TileLayerConfig(ESRI_IMAGERY_URL, ESRI_ATTRIBUTION),
    MapLayer.STREET: TileLayerConfig(OSM_URL, OSM_ATTRIBUTION),
    MapLayer.HYBRID: TileLayerConfig(ESRI_IMAGERY_URL, ESRI_ATTRIBUTION, overlay_url=LABELS_URL),
}


def tile_layer_config(layer) -> TileLayerConfig:
    """Tile configuration for a layer; unknown layers fall back to satellite."""
    try:
        return TILE_LAYERS[MapLayer(layer)]
    except ValueError:
        return TILE_LAYERS[MapLayer.SATELLITE]
