"""Domain Types — identity types and the stored record shape.

Invariants:
    - InstanceId wraps the client-visible string id (UUID4 text when generated)
    - StoredInstance.binary_weeks is the '|'-joined decimal storage form
    - StoredInstance.creation_date is YYYY/MM/DD

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - StoredInstance frozen: records are never updated in place
"""

from dataclasses import dataclass
from typing import NewType


InstanceId = NewType("InstanceId", str)

CREATION_DATE_FORMAT = "%Y/%m/%d"


@dataclass(frozen=True)
class StoredInstance:
    """One persisted (instanceId, username) record."""
    instance_id: InstanceId
    username: str
    binary_weeks: str
    creation_date: str
