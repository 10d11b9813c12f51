"""Instance Validator — required-field, week-format and uniqueness rules.

Invariants:
    - Runs before any persistence call
    - MissingFields is reported before InvalidFormat
    - A caller-supplied instance id is used verbatim (no existence check)
    - Nonzero stored count for the exact (instanceId, username) pair is a duplicate

Design Decisions:
    - Pure functions: the service supplies the repository count and the id generator
"""

import uuid
from typing import Callable, Sequence

from availability.core.domain_types import InstanceId
from availability.core.errors import (
    DuplicateUsernameError, ErrorContext, InvalidWeekFormatError, MissingFieldsError,
)
from availability.core.week_codec import is_binary_week


def new_instance_id() -> str:
    return str(uuid.uuid4())


def check_required_fields(username: str, binary_weeks: Sequence[str]) -> None:
    missing = []
    if not username:
        missing.append("username")
    if not binary_weeks:
        missing.append("binaryWeeks")
    if missing:
        raise MissingFieldsError(missing, ErrorContext(username=username or None))


def check_week_formats(binary_weeks: Sequence[str]) -> None:
    for index, week in enumerate(binary_weeks):
        if not is_binary_week(week):
            raise InvalidWeekFormatError(week, index)


def validate_instance_request(username: str, binary_weeks: Sequence[str]) -> None:
    """Reject empty fields, then malformed weeks."""
    check_required_fields(username, binary_weeks)
    check_week_formats(binary_weeks)


def resolve_instance_id(
    instance_id: str | None,
    generate: Callable[[], str] = new_instance_id,
) -> InstanceId:
    """Caller id verbatim, or a fresh UUID4 when absent/empty."""
    return InstanceId(instance_id if instance_id else generate())


def ensure_username_available(
    existing_count: int, instance_id: InstanceId, username: str,
) -> None:
    if existing_count > 0:
        raise DuplicateUsernameError(instance_id, username)
