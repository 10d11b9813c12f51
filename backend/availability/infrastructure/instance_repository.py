"""SQL Instance Repository — InstanceRepository over one table per collection.

Invariants:
    - Every store round trip is bounded by timeout_seconds, then abandoned
    - Any failed round trip rolls the session back before raising
    - Driver errors surface as DatabaseError; deadline expiry as StoreTimeoutError
    - A unique-index violation on insert surfaces as DuplicateUsernameError
    - Insert and delete commit immediately (one mutating operation per request)

Design Decisions:
    - Session injected per request: the repository holds no state between requests
    - Rows read positionally: column keys differ from the document column names
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from sqlalchemy import Table, delete, func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from availability.core.domain_types import InstanceId, StoredInstance
from availability.core.errors import (
    DatabaseError, DuplicateUsernameError, ErrorContext, StoreTimeoutError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORE_TIMEOUT_SECONDS = 10.0


class SqlInstanceRepository:
    """Instance records stored as rows of `table`."""

    def __init__(
        self,
        db: AsyncSession,
        table: Table,
        timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS,
    ):
        self._db = db
        self._table = table
        self._timeout = timeout_seconds

    async def count(self, instance_id: InstanceId, username: str) -> int:
        t = self._table
        stmt = (
            select(func.count())
            .select_from(t)
            .where(t.c.instance_id == instance_id, t.c.username == username)
        )
        result = await self._run("count", self._db.execute(stmt), instance_id)
        return int(result.scalar_one())

    async def find_by_instance(self, instance_id: InstanceId) -> list[StoredInstance]:
        t = self._table
        stmt = (
            select(t.c.instance_id, t.c.username, t.c.binary_weeks, t.c.creation_date)
            .where(t.c.instance_id == instance_id)
            .order_by(t.c.id)
        )
        result = await self._run("find", self._db.execute(stmt), instance_id)
        return [
            StoredInstance(
                instance_id=InstanceId(row[0]),
                username=row[1],
                binary_weeks=row[2],
                creation_date=row[3],
            )
            for row in result.all()
        ]

    async def find_creation_date(self, instance_id: InstanceId) -> str | None:
        """creationDate of the oldest record under instance_id, if any."""
        t = self._table
        stmt = (
            select(t.c.creation_date)
            .where(t.c.instance_id == instance_id)
            .order_by(t.c.id)
            .limit(1)
        )
        result = await self._run("find", self._db.execute(stmt), instance_id)
        return result.scalars().first()

    async def insert(self, record: StoredInstance) -> None:
        stmt = insert(self._table).values(
            instance_id=record.instance_id,
            username=record.username,
            binary_weeks=record.binary_weeks,
            creation_date=record.creation_date,
        )
        try:
            await self._run("insert", self._db.execute(stmt), record.instance_id)
            await self._run("commit", self._db.commit(), record.instance_id)
        except IntegrityError as e:
            raise DuplicateUsernameError(record.instance_id, record.username) from e

    async def delete(self, instance_id: InstanceId, username: str) -> int:
        t = self._table
        stmt = delete(t).where(
            t.c.instance_id == instance_id, t.c.username == username,
        )
        result = await self._run("delete", self._db.execute(stmt), instance_id)
        await self._run("commit", self._db.commit(), instance_id)
        return result.rowcount

    async def _run(
        self, operation: str, call: Awaitable[T], instance_id: str | None = None,
    ) -> T:
        """Await one store call under the deadline, mapping failures."""
        try:
            return await asyncio.wait_for(call, timeout=self._timeout)
        except asyncio.TimeoutError:
            await self._rollback(operation)
            logger.error(
                f"Store {operation} timed out after {self._timeout}s",
                extra={"instance_id": instance_id, "error_code": "STORE_TIMEOUT"},
            )
            raise StoreTimeoutError(
                operation, self._timeout, ErrorContext(instance_id=instance_id),
            )
        except IntegrityError:
            await self._rollback(operation)
            raise
        except SQLAlchemyError as e:
            await self._rollback(operation)
            logger.error(
                f"Store {operation} failed: {e}",
                extra={"instance_id": instance_id, "error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(
                "Store operation failed", operation,
                ErrorContext(instance_id=instance_id),
            ) from e

    async def _rollback(self, operation: str) -> None:
        try:
            await self._db.rollback()
        except SQLAlchemyError as e:
            logger.warning(f"Rollback after failed {operation} also failed: {e}")
