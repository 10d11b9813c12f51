"""In-memory InstanceRepository — list-backed store for service tests.

Invariants:
    - Satisfies core.repository_protocols.InstanceRepository structurally
    - Records kept in insertion order (mirrors the SQL repository's id ordering)
    - calls records every method name in order, for sequencing assertions
"""

from availability.core.domain_types import InstanceId, StoredInstance


class InMemoryInstanceRepository:
    def __init__(self, records: list[StoredInstance] | None = None):
        self.records: list[StoredInstance] = list(records or [])
        self.calls: list[str] = []

    async def count(self, instance_id: InstanceId, username: str) -> int:
        self.calls.append("count")
        return sum(
            1 for r in self.records
            if r.instance_id == instance_id and r.username == username
        )

    async def find_by_instance(self, instance_id: InstanceId) -> list[StoredInstance]:
        self.calls.append("find_by_instance")
        return [r for r in self.records if r.instance_id == instance_id]

    async def find_creation_date(self, instance_id: InstanceId) -> str | None:
        self.calls.append("find_creation_date")
        for r in self.records:
            if r.instance_id == instance_id:
                return r.creation_date
        return None

    async def insert(self, record: StoredInstance) -> None:
        self.calls.append("insert")
        self.records.append(record)

    async def delete(self, instance_id: InstanceId, username: str) -> int:
        self.calls.append("delete")
        before = len(self.records)
        self.records = [
            r for r in self.records
            if not (r.instance_id == instance_id and r.username == username)
        ]
        return before - len(self.records)
