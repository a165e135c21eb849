"""
EVPlanner - Health Check Router
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from evplanner.config import get_settings
from evplanner.database import async_session_maker

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])
settings = get_settings()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str


class DetailedHealthResponse(BaseModel):
    """Detailed health check response."""
    status: str
    timestamp: str
    services: dict


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe. Always answers 200."""
    return HealthResponse(status="OK", timestamp=utc_timestamp())


@router.get("/health/detailed", response_model=DetailedHealthResponse)
async def detailed_health_check():
    """
    Detailed health check with the database status.
    """
    services = {
        "api": "healthy",
        "database": "unknown"
    }

    try:
        async with async_session_maker() as session:
            await session.execute(text("SELECT 1"))
        services["database"] = "healthy"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        services["database"] = "unreachable"

    overall_status = "OK" if all(
        v == "healthy" for v in services.values()
    ) else "degraded"

    return DetailedHealthResponse(
        status=overall_status,
        timestamp=utc_timestamp(),
        services=services
    )
