"""
EVPlanner - Authentication Service
JWT authentication for catalog administration
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from evplanner.config import get_settings
from evplanner.database import get_db
from evplanner.models.admin import AdminAccount

logger = logging.getLogger(__name__)
settings = get_settings()

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# OAuth2 scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


class AuthService:
    """Password hashing and token handling for catalog admins."""

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Check a login password against the stored bcrypt hash."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def get_password_hash(password: str) -> str:
        """bcrypt hash for a new admin password."""
        return pwd_context.hash(password)

    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Signed HS256 token; `sub` carries the admin account id."""
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=settings.jwt_expire_minutes)

        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=ALGORITHM)

    @staticmethod
    def decode_token(token: str) -> Optional[dict]:
        """Claims of a valid token, None when it is expired or tampered with."""
        try:
            return jwt.decode(token, settings.jwt_secret_key, algorithms=[ALGORITHM])
        except JWTError:
            return None

    @staticmethod
    async def authenticate(
        db: AsyncSession,
        username: str,
        password: str
    ) -> Optional[AdminAccount]:
        """Authenticate an admin by username and password."""
        result = await db.execute(
            select(AdminAccount).where(AdminAccount.username == username)
        )
        account = result.scalar_one_or_none()

        if not account:
            logger.warning(f"Login attempt for non-existent admin: {username}")
            return None

        if not account.is_active:
            logger.warning(f"Login attempt for inactive admin: {username}")
            return None

        if not AuthService.verify_password(password, account.hashed_password):
            logger.warning(f"Invalid password for admin: {username}")
            return None

        account.last_login = datetime.utcnow()
        await db.commit()

        logger.info(f"Admin authenticated successfully: {username}")
        return account

    @staticmethod
    async def get_account_by_id(db: AsyncSession, account_id: int) -> Optional[AdminAccount]:
        """Get admin account by ID."""
        result = await db.execute(
            select(AdminAccount).where(AdminAccount.id == account_id)
        )
        return result.scalar_one_or_none()


# FastAPI dependencies guarding product mutations
async def get_current_admin(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db)
) -> Optional[AdminAccount]:
    """Get current admin from the bearer token, or None."""
    if not token:
        return None

    payload = AuthService.decode_token(token)
    if not payload:
        return None

    account_id = payload.get("sub")
    if not account_id:
        return None

    account = await AuthService.get_account_by_id(db, int(account_id))
    if account is None or not account.is_active:
        return None
    return account


async def require_admin(
    current_admin: Optional[AdminAccount] = Depends(get_current_admin)
) -> AdminAccount:
    """Require an authenticated admin, raise 401 otherwise."""
    if not current_admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_admin


async def create_default_admin(db: AsyncSession) -> None:
    """Create the configured admin account if no admin exists."""
    result = await db.execute(select(AdminAccount).limit(1))
    if result.scalar_one_or_none():
        logger.info("Admin account already exists, skipping default admin creation")
        return

    admin = AdminAccount(
        username=settings.admin_username,
        hashed_password=AuthService.get_password_hash(settings.admin_password),
        is_active=True
    )
    db.add(admin)
    await db.commit()

    logger.info(f"🔐 Created default admin account ({settings.admin_username})")
