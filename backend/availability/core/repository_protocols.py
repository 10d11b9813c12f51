"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store IO goes through InstanceRepository
    - Implementations are injected into handlers per request

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
    - Async in Protocol: implementations do IO; core functions using the
      results stay synchronous
"""

from typing import Protocol

from availability.core.domain_types import InstanceId, StoredInstance


class InstanceRepository(Protocol):
    """Contract for instance record persistence — implemented by shell."""
    async def count(self, instance_id: InstanceId, username: str) -> int: ...
    async def find_by_instance(self, instance_id: InstanceId) -> list[StoredInstance]: ...
    async def find_creation_date(self, instance_id: InstanceId) -> str | None: ...
    async def insert(self, record: StoredInstance) -> None: ...
    async def delete(self, instance_id: InstanceId, username: str) -> int: ...
