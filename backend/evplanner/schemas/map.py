"""
EVPlanner - Map Pydantic Schemas
Infrastructure diagrams: placed icons and the cables between them
"""
from enum import Enum
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Annotated, Optional, List

from evplanner.schemas.base import CamelModel


# [lat, lng]
LatLng = Annotated[List[float], Field(min_length=2, max_length=2)]


class MapLayer(str, Enum):
    """Tile layer shown under the diagram."""
    SATELLITE = "satellite"
    STREET = "street"
    HYBRID = "hybrid"


class MapIcon(CamelModel):
    """An infrastructure marker placed on the map."""
    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description="Icon type id, e.g. 'solar'")
    position: LatLng
    name: str


class MapConnection(CamelModel):
    """
    A cable between two icons.

    `from`/`to` reference icon ids; the position and name snapshots are
    kept for clients that draw cables without resolving the icon list.
    """
    id: str = Field(..., min_length=1)
    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    source_position: Optional[LatLng] = Field(default=None, alias="fromPos")
    target_position: Optional[LatLng] = Field(default=None, alias="toPos")
    source_name: Optional[str] = Field(default=None, alias="fromName")
    target_name: Optional[str] = Field(default=None, alias="toName")


class MapCreate(CamelModel):
    """Schema for saving a new map."""
    name: str = Field(..., max_length=255)
    center: LatLng
    layer: MapLayer = MapLayer.SATELLITE
    icons: List[MapIcon] = Field(default_factory=list)
    connections: List[MapConnection] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Map name must not be blank")
        return v

    @field_validator("layer", mode="before")
    @classmethod
    def default_layer(cls, v):
        return v or MapLayer.SATELLITE

    @field_validator("icons", "connections", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class MapUpdate(CamelModel):
    """Schema for updating a map. Only provided fields change."""
    name: Optional[str] = Field(default=None, max_length=255)
    center: Optional[LatLng] = None
    layer: Optional[MapLayer] = None
    icons: Optional[List[MapIcon]] = None
    connections: Optional[List[MapConnection]] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Map name must not be blank")
        return v


class MapResponse(CamelModel):
    """Full map including its scene."""
    id: int
    name: str
    center: LatLng
    layer: MapLayer
    icons: List[MapIcon] = []
    connections: List[MapConnection] = []
    created_at: datetime
    updated_at: datetime


class MapSummary(CamelModel):
    """Listing entry for the saved-maps picker."""
    id: int
    name: str
    layer: MapLayer
    icon_count: int
    connection_count: int
    created_at: datetime
    updated_at: datetime


class MapSavedResponse(BaseModel):
    """Response for create/update."""
    message: str
    map: MapResponse
