"""
Pytest configuration and fixtures.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Set test environment before importing app
os.environ["ENVIRONMENT"] = "testing"
os.environ["DEBUG"] = "true"
os.environ["DATABASE_ENABLED"] = "false"
os.environ["USER_DOMAIN"] = "iplantcollaborative.org"

from database.models import Base, User  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"
USER_DOMAIN = "iplantcollaborative.org"


# ============ Database Fixtures ============


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory SQLite database with the full schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for driving repositories and services directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def create_user(session_factory) -> Callable[[str], Awaitable[User]]:
    """Factory that commits a user row in its own session."""

    async def _create(username: str) -> User:
        async with session_factory() as session:
            user = User(username=username)
            session.add(user)
            await session.commit()
            return user

    return _create


# ============ App Fixtures ============


@pytest.fixture
def client() -> TestClient:
    """Synchronous test client without a database."""
    from api.main import app

    return TestClient(app)


@pytest.fixture
async def async_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Asynchronous test client whose requests use the test database."""
    from api.dependencies import get_db_session
    from api.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


# ============ Test Data Fixtures ============


@pytest.fixture
async def alice(create_user) -> User:
    """A plain user for the preferences, sessions and searches endpoints."""
    return await create_user("alice")


@pytest.fixture
async def bag_user(create_user) -> User:
    """A user qualified with the bag user domain."""
    return await create_user(f"alice@{USER_DOMAIN}")
