"""
EVPlanner - Maps Router
Saved infrastructure diagrams (icons and cable connections)
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from evplanner.database import get_db
from evplanner.models.map import Map
from evplanner.schemas.base import DeleteResponse
from evplanner.schemas.map import (
    MapCreate,
    MapUpdate,
    MapResponse,
    MapSummary,
    MapSavedResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/maps", tags=["Maps"])


def to_response(map_obj: Map) -> MapResponse:
    return MapResponse(
        id=map_obj.id,
        name=map_obj.name,
        center=map_obj.center,
        layer=map_obj.layer,
        icons=map_obj.icons or [],
        connections=map_obj.connections or [],
        created_at=map_obj.created_at,
        updated_at=map_obj.updated_at
    )


async def get_map_or_404(db: AsyncSession, map_id: int) -> Map:
    result = await db.execute(select(Map).where(Map.id == map_id))
    map_obj = result.scalar_one_or_none()

    if not map_obj:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Map not found"
        )
    return map_obj


@router.get("", response_model=List[MapSummary])
async def list_maps(db: AsyncSession = Depends(get_db)):
    """List saved maps (summaries for the picker), newest first."""
    try:
        result = await db.execute(select(Map).order_by(Map.created_at.desc(), Map.id.desc()))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching maps: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch maps")

    return [
        MapSummary(
            id=m.id,
            name=m.name,
            layer=m.layer,
            icon_count=len(m.icons or []),
            connection_count=len(m.connections or []),
            created_at=m.created_at,
            updated_at=m.updated_at
        )
        for m in result.scalars().all()
    ]


@router.get("/{map_id}", response_model=MapResponse)
async def get_map(map_id: int, db: AsyncSession = Depends(get_db)):
    """Get a map with its icons and connections."""
    return to_response(await get_map_or_404(db, map_id))


@router.post("", response_model=MapSavedResponse, status_code=status.HTTP_201_CREATED)
async def create_map(data: MapCreate, db: AsyncSession = Depends(get_db)):
    """
    Save a new map.

    - **name**: trimmed, must not be blank
    - **center**: [lat, lng]
    - **layer**: satellite (default), street or hybrid
    - **icons** / **connections**: the scene, stored as-is
    """
    map_obj = Map(
        name=data.name,
        center=list(data.center),
        layer=data.layer.value,
        icons=[icon.model_dump(by_alias=True) for icon in data.icons],
        connections=[conn.model_dump(by_alias=True) for conn in data.connections]
    )
    try:
        db.add(map_obj)
        await db.flush()
        await db.refresh(map_obj)
    except SQLAlchemyError as e:
        logger.error(f"Error saving map: {e}")
        raise HTTPException(status_code=500, detail="Failed to save map")

    logger.info(
        f"Map '{map_obj.name}' saved with {len(map_obj.icons)} icons "
        f"and {len(map_obj.connections)} connections"
    )
    return MapSavedResponse(message="Map saved successfully", map=to_response(map_obj))


@router.put("/{map_id}", response_model=MapSavedResponse)
async def update_map(map_id: int, data: MapUpdate, db: AsyncSession = Depends(get_db)):
    """Update the provided fields of a map. Last write wins."""
    map_obj = await get_map_or_404(db, map_id)

    if data.name is not None:
        map_obj.name = data.name
    if data.center is not None:
        map_obj.center = list(data.center)
    if data.layer is not None:
        map_obj.layer = data.layer.value
    if data.icons is not None:
        map_obj.icons = [icon.model_dump(by_alias=True) for icon in data.icons]
    if data.connections is not None:
        map_obj.connections = [conn.model_dump(by_alias=True) for conn in data.connections]

    try:
        await db.flush()
        await db.refresh(map_obj)
    except SQLAlchemyError as e:
        logger.error(f"Error updating map {map_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update map")

    return MapSavedResponse(message="Map updated successfully", map=to_response(map_obj))


@router.delete("/{map_id}", response_model=DeleteResponse)
async def delete_map(map_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a map."""
    map_obj = await get_map_or_404(db, map_id)

    try:
        await db.delete(map_obj)
        await db.flush()
    except SQLAlchemyError as e:
        logger.error(f"Error deleting map {map_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete map")

    logger.info(f"Map {map_id} deleted")
    return DeleteResponse(message="Map deleted successfully", id=map_id)
