"""Service test fixtures — async SQLite DB, repository, service and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The ProfileService under test writes through a real SqlProfileRepository
    - db_manager patched so the readiness probe sees the test database

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - app.state.profile_service replaced directly: the lifespan is not run by ASGITransport
"""

from itertools import count

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.profile_repository import SqlProfileRepository
from app.models.profile import Profile  # noqa: F401
from app.services.profile_service import ProfileService
import app.infrastructure.database as db_module
from app.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def test_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def repository(test_manager):
    return SqlProfileRepository(test_manager)


@pytest.fixture
def sequential_ids():
    """Deterministic id generator: u1, u2, ..."""
    counter = count(1)
    return lambda: f"u{next(counter)}"


@pytest.fixture
def service(repository, sequential_ids):
    return ProfileService(repository, id_generator=sequential_ids)


@pytest.fixture
async def client(service, test_manager):
    """FastAPI test client bound to the test service."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_manager
    app.state.profile_service = service

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager
    del app.state.profile_service
