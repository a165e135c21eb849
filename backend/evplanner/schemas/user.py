"""
EVPlanner - User Pydantic Schemas
"""
from pydantic import Field
from datetime import datetime

from evplanner.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Schema for creating a user. Presence is the only check."""
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)


class UserResponse(CamelModel):
    """Schema for user response."""
    id: int
    name: str
    email: str
    created_at: datetime
