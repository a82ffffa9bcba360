"""
Database engine and session factory.

One AsyncSession per request or job; repositories and services share it.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from affiliates.config.settings import settings
from affiliates.models import Base

# SQLite pools take no sizing options
pool_options = (
    {}
    if settings.is_sqlite
    else {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True}
)

async_engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    **pool_options,
)

async_session_maker = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Provide a database session.

    Yields:
        AsyncSession bound to the application engine
    """
    async with async_session_maker() as session:
        yield session


async def init_database() -> None:
    """Create all database tables (checkfirst)."""
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    logger.info("Database tables initialized")
