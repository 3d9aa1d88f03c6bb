"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from apps.api.deps import get_event_publisher, get_uow
from apps.api.main import app
from ecommerce.data.models import Base
from ecommerce.data.uow import UnitOfWork
from ecommerce.infrastructure.adapters.persistence import InMemoryStore, InMemoryUnitOfWork
from ecommerce.infrastructure.event_bus import InMemoryEventBus


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Create test session factory."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def sql_uow(test_session_factory) -> UnitOfWork:
    return UnitOfWork(test_session_factory)


@pytest.fixture
def api_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def api_event_bus() -> InMemoryEventBus:
    return InMemoryEventBus()


@pytest.fixture
def test_client(api_store, api_event_bus) -> TestClient:
    """FastAPI test client backed by a fresh in-memory store."""
    app.dependency_overrides[get_uow] = lambda: InMemoryUnitOfWork(api_store)
    app.dependency_overrides[get_event_publisher] = lambda: api_event_bus

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
