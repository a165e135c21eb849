"""
EVPlanner - Authentication Router
Admin login for catalog management
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel

from evplanner.config import get_settings
from evplanner.database import get_db
from evplanner.models.admin import AdminAccount
from evplanner.services.auth import AuthService, require_admin

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["authentication"])
settings = get_settings()


class Token(BaseModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    username: str


class AdminResponse(BaseModel):
    """Admin account without sensitive data."""
    id: int
    username: str
    is_active: bool


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """
    Authenticate an admin and return a JWT token.

    Use form data with 'username' and 'password' fields.
    """
    account = await AuthService.authenticate(db, form_data.username, form_data.password)

    if not account:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = AuthService.create_access_token(data={"sub": str(account.id)})

    return Token(
        access_token=access_token,
        expires_in=settings.jwt_expire_minutes * 60,
        username=account.username
    )


@router.get("/me", response_model=AdminResponse)
async def get_current_admin_info(current_admin: AdminAccount = Depends(require_admin)):
    """Get the authenticated admin."""
    return AdminResponse(
        id=current_admin.id,
        username=current_admin.username,
        is_active=current_admin.is_active
    )
