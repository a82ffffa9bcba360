"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for Settings; must be set before any affiliates import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("LOG_FILE", "")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import random
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from affiliates.models import Base
from affiliates.services import AffiliateProgram


class FakeClock:
    """Controllable time source."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now += timedelta(**delta)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost so hashing does not dominate test time."""
    monkeypatch.setattr("affiliates.services.auth.crypto.BCRYPT_ROUNDS", 4)


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Database session against the in-memory engine."""
    session_maker = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def clock():
    """Clock frozen at 2024-03-20 12:00 UTC."""
    return FakeClock(datetime(2024, 3, 20, 12, 0, tzinfo=UTC))


@pytest.fixture
def notifier():
    """Notifier that records calls."""
    mock = AsyncMock()
    mock.notify = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def program(db_session, notifier, clock):
    """AffiliateProgram wired to the test database, notifier and clock."""
    return AffiliateProgram(
        db_session, notifier=notifier, clock=clock, rng=random.Random(7)
    )


@pytest_asyncio.fixture
async def active_affiliate(program):
    """Registered and approved affiliate; returns its ID."""
    result = await program.register("Jane Doe", "jane@example.com", "s3cret-pass")
    assert result.success, result.error
    affiliate_id = result.data["affiliate_id"]
    activated = await program.activate_affiliate(affiliate_id)
    assert activated.success
    return affiliate_id
