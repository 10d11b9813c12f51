"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - fake_repository gives service tests a store without SQL

Design Decisions:
    - SQLite in-memory: fast, no external dependency, the unique index behaves
      the same as on PostgreSQL for these tests
    - raise_app_exceptions=False: the catch-all handler is exercised like in production
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from availability.config import get_settings
from availability.db.base import Base
from availability.infrastructure.database import get_db, DatabaseSessionManager
from availability.infrastructure.instance_repository import SqlInstanceRepository
from availability.models.instance_record import instance_table
import availability.infrastructure.database as db_module
from availability.main import app

from tests.services.fake_repository import InMemoryInstanceRepository


@pytest.fixture
def table():
    return instance_table(get_settings().db_collection)


@pytest.fixture
async def test_engine(table):
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
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def sql_repository(test_db, table):
    return SqlInstanceRepository(test_db, table, timeout_seconds=5.0)


@pytest.fixture
def fake_repository():
    return InMemoryInstanceRepository()


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
