"""
EVPlanner - Pydantic Schemas
"""
from evplanner.schemas.user import UserCreate, UserResponse
from evplanner.schemas.product import ProductCreate, ProductUpdate, ProductResponse, CategoryInfo
from evplanner.schemas.map import (
    MapCreate, MapUpdate, MapResponse, MapSummary, MapIcon, MapConnection, MapLayer
)

__all__ = [
    "UserCreate", "UserResponse",
    "ProductCreate", "ProductUpdate", "ProductResponse", "CategoryInfo",
    "MapCreate", "MapUpdate", "MapResponse", "MapSummary", "MapIcon", "MapConnection", "MapLayer",
]
