"""
Shared fixtures.

The database URL is pointed at a throwaway SQLite file before the
application is imported, because settings are read once at import time.
"""
import asyncio
import os
import tempfile

os.environ["EVPLANNER_DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), f'evplanner_test_{os.getpid()}.db')}"
)
os.environ["EVPLANNER_SEED_ON_STARTUP"] = "false"
os.environ["EVPLANNER_ADMIN_USERNAME"] = "admin"
os.environ["EVPLANNER_ADMIN_PASSWORD"] = "admin123"

import httpx
import pytest
from fastapi.testclient import TestClient

from evplanner import models  # noqa: F401
from evplanner.database import Base, engine, async_session_maker
from evplanner.main import app
from evplanner.services.maps_client import MapsClient


async def reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client():
    """TestClient over an empty database (lifespan creates the admin)."""
    asyncio.run(reset_database())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/auth/login",
        data={"username": "admin", "password": "admin123"}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
async def db_session():
    await reset_database()
    async with async_session_maker() as session:
        yield session


@pytest.fixture
async def maps_client():
    """Maps client wired straight to the ASGI app."""
    await reset_database()
    return MapsClient(
        base_url="http://testserver/api",
        transport=httpx.ASGITransport(app=app)
    )


@pytest.fixture
def make_product():
    """Factory for a complete product payload."""
    def _make(**overrides):
        product = {
            "category": "EV Charger",
            "name": "Test Charger 50kW",
            "cost": 42000,
            "currency": "USD",
            "rating": "4.2/5",
            "manufacturer": "ChargePoint",
            "manufacturedIn": "USA",
            "efficiency": 95,
            "lifetime": 12,
            "maintenanceCost": 1500,
            "footprint": "Floor-standing",
            "neviEligible": True,
            "documents": ["a.pdf", "b.pdf"],
            "description": "Test product",
        }
        product.update(overrides)
        return product
    return _make
