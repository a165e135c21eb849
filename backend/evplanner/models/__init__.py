"""
EVPlanner - Database Models
"""
from evplanner.models.user import User
from evplanner.models.product import Product
from evplanner.models.map import Map
from evplanner.models.admin import AdminAccount

__all__ = [
    "User",
    "Product",
    "Map",
    "AdminAccount"
]
