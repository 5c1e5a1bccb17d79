"""Engine, session factory and schema setup for the studbook database."""

import logging
from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from studbook.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

SQLITE_PREFIX = "sqlite:///"


def to_async_url(url: str) -> str:
    """Use the aiosqlite driver for plain sqlite URLs."""
    if url.startswith(SQLITE_PREFIX):
        return "sqlite+aiosqlite:///" + url.removeprefix(SQLITE_PREFIX)
    return url


async_engine = create_async_engine(
    to_async_url(settings.database_url),
    echo=settings.debug,
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    bind=async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Declarative base of horses, owners and parent links."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; commits on success, rolls back on error."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Create the sqlite data directory if needed, then all tables."""
    url = settings.database_url
    if url.startswith(SQLITE_PREFIX) and ":memory:" not in url:
        Path(url.removeprefix(SQLITE_PREFIX)).parent.mkdir(parents=True, exist_ok=True)

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", url)
