"""Instance Service — create, fetch, and delete availability records.

Invariants:
    - Validation (fields, week format) runs before any repository call
    - Uniqueness is checked by count before insert; the store's unique index
      catches the concurrent case
    - creationDate is reused from any existing record of the instance,
      otherwise today's local date (YYYY/MM/DD)
    - Each create performs exactly one mutating store call

Design Decisions:
    - Clock and id generator injected: deterministic tests without patching
    - Week encoding failures after validation are internal (CONVERSION_ERROR),
      not client errors
"""

import logging
from datetime import date
from typing import Callable

from availability.core.domain_types import (
    CREATION_DATE_FORMAT, InstanceId, StoredInstance,
)
from availability.core.errors import (
    ErrorContext, InvalidWeekFormatError, ResourceNotFoundError, WeekConversionError,
)
from availability.core.repository_protocols import InstanceRepository
from availability.core.validate_instance import (
    ensure_username_available, resolve_instance_id, validate_instance_request,
    new_instance_id,
)
from availability.core.week_codec import decode_weeks, encode_weeks
from availability.schemas.instance import InstanceCreate, InstanceView

logger = logging.getLogger(__name__)


class InstanceService:
    """Request-scoped orchestration over one InstanceRepository."""

    def __init__(
        self,
        repository: InstanceRepository,
        today: Callable[[], date] = date.today,
        generate_id: Callable[[], str] = new_instance_id,
    ):
        self.repository = repository
        self._today = today
        self._generate_id = generate_id

    async def create(self, body: InstanceCreate) -> InstanceId:
        """Validate, encode, and insert one (instanceId, username) record."""
        validate_instance_request(body.username, body.binary_weeks)
        instance_id = resolve_instance_id(body.instance_id, self._generate_id)

        existing = await self.repository.count(instance_id, body.username)
        ensure_username_available(existing, instance_id, body.username)

        stored_weeks = self._encode_for_storage(instance_id, body.binary_weeks)
        creation_date = await self._creation_date_for(instance_id)

        await self.repository.insert(StoredInstance(
            instance_id=instance_id,
            username=body.username,
            binary_weeks=stored_weeks,
            creation_date=creation_date,
        ))
        logger.info(
            "Instance record created",
            extra={"instance_id": instance_id, "username": body.username},
        )
        return instance_id

    async def fetch(self, instance_id: str) -> list[InstanceView]:
        """All records of an instance with weeks decoded; empty when none."""
        records = await self.repository.find_by_instance(InstanceId(instance_id))
        return [
            InstanceView(
                instance_id=r.instance_id,
                username=r.username,
                binary_weeks=decode_weeks(r.binary_weeks),
                creation_date=r.creation_date,
            )
            for r in records
        ]

    async def delete(self, instance_id: str, username: str) -> None:
        """Remove one record; ResourceNotFoundError when nothing matched."""
        deleted = await self.repository.delete(InstanceId(instance_id), username)
        if deleted == 0:
            raise ResourceNotFoundError(
                "Instance record", f"{instance_id}/{username}",
                ErrorContext(instance_id=instance_id, username=username),
            )
        logger.info(
            "Instance record deleted",
            extra={"instance_id": instance_id, "username": username},
        )

    def _encode_for_storage(self, instance_id: InstanceId, weeks: list[str]) -> str:
        try:
            return encode_weeks(weeks)
        except InvalidWeekFormatError as e:
            raise WeekConversionError(
                e.week, ErrorContext(instance_id=instance_id),
            ) from e

    async def _creation_date_for(self, instance_id: InstanceId) -> str:
        existing = await self.repository.find_creation_date(instance_id)
        if existing:
            return existing
        return self._today().strftime(CREATION_DATE_FORMAT)
