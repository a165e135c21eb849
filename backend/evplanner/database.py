"""
EVPlanner - Database Configuration
Async SQLAlchemy setup over SQLite (aiosqlite)

Variable-shape fields (product documents, map center/icons/connections)
are stored as JSON text through the JSONText column type so that every
table encodes and decodes them the same way.
"""
from sqlalchemy import JSON
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from sqlalchemy.types import TypeDecorator

from evplanner.config import get_settings

settings = get_settings()

is_sqlite = "sqlite" in settings.database_url

if is_sqlite:
    # SQLite: no pooling, a connection is never shared between event loops
    engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        poolclass=NullPool,
        connect_args={"check_same_thread": False}
    )
else:
    engine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )

# Session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class JSONText(TypeDecorator):
    """
    JSON column (TEXT on SQLite) for Python lists/dicts.

    NULL is decoded as the column's empty value (an empty list by default),
    which matches how rows written before a field existed are read back.
    """
    impl = JSON
    cache_ok = True

    def __init__(self, empty=list):
        # Python None is stored as SQL NULL, not the JSON literal null
        super().__init__(none_as_null=True)
        self.empty = empty

    def process_result_value(self, value, dialect):
        if value is None:
            return self.empty() if self.empty is not None else None
        return value


async def get_db() -> AsyncSession:
    """Dependency to get database session."""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Initialize database tables."""
    # Import models so their tables are registered on Base.metadata
    from evplanner import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
