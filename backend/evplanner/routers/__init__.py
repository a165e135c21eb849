"""
EVPlanner - API Routers
"""
from evplanner.routers.auth import router as auth_router
from evplanner.routers.health import router as health_router
from evplanner.routers.maps import router as maps_router
from evplanner.routers.products import router as products_router
from evplanner.routers.users import router as users_router

__all__ = ["auth_router", "health_router", "maps_router", "products_router", "users_router"]
