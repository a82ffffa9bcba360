"""
Async runner for dramatiq tasks.

Dramatiq actors are synchronous; this module runs service coroutines on a
per-thread event loop with a per-call database engine.
"""

import asyncio
import threading
from collections.abc import AsyncIterator, Coroutine
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from affiliates.config.settings import settings

T = TypeVar("T")

_thread_local = threading.local()


def get_event_loop() -> asyncio.AbstractEventLoop:
    """
    Get or create event loop for current thread.

    Reusing one loop per worker thread prevents
    "Future attached to a different loop" errors.
    """
    loop = getattr(_thread_local, "loop", None)
    if loop is None or loop.is_closed():
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        _thread_local.loop = loop
        logger.debug(
            f"Created new event loop for thread {threading.current_thread().name}"
        )
    return loop


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in the thread's event loop.

    Args:
        coro: Async coroutine to run

    Returns:
        Result of the coroutine
    """
    return get_event_loop().run_until_complete(coro)


@asynccontextmanager
async def create_local_session() -> AsyncIterator[AsyncSession]:
    """
    Create a database session bound to the current event loop.

    Uses NullPool so no connection outlives the loop that opened it.

    Usage:
        async with create_local_session() as session:
            await session.execute(...)
    """
    local_engine = create_async_engine(
        settings.database_url,
        echo=False,
        poolclass=NullPool,
    )
    local_session_maker = async_sessionmaker(
        local_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    try:
        async with local_session_maker() as session:
            yield session
    finally:
        await local_engine.dispose()
