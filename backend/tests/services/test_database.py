"""Database Session Manager — store failures inside a session become DatabaseError."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from availability.core.errors import DatabaseError
from availability.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield mgr
    await mgr.close()


async def test_session_maps_sqlalchemy_error(manager):
    error = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session():
            raise error

    assert exc_info.value.operation == "session"
    assert exc_info.value.__cause__ is error
    assert "disk I/O" not in exc_info.value.message


async def test_session_lets_other_errors_through(manager):
    with pytest.raises(ValueError):
        async with manager.session():
            raise ValueError("not a store error")


async def test_health_check_reports_reachable_store(manager):
    assert await manager.health_check() is True
    async with manager.session() as db:
        assert (await db.execute(text("SELECT 1"))).scalar_one() == 1
