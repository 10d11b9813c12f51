"""Instance Record Table — one row per (instanceId, username) document.

Invariants:
    - Column names match the document layout: instanceId, username,
      binaryWeeks, creationDate
    - (instanceId, username) is unique at the store level
    - binaryWeeks holds the '|'-joined decimal storage string

Design Decisions:
    - Core Table built per collection name: DB_COLLECTION picks the table at
      runtime, which a fixed ORM __tablename__ cannot express
    - Surrogate integer id: the document layout has no natural primary key column
"""

from sqlalchemy import Column, Index, Integer, String, Table, UniqueConstraint

from availability.db.base import Base

DEFAULT_COLLECTION = "instances"


def instance_table(name: str = DEFAULT_COLLECTION) -> Table:
    """Return the table for collection `name`, registering it on first use."""
    existing = Base.metadata.tables.get(name)
    if existing is not None:
        return existing
    return Table(
        name,
        Base.metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("instanceId", String, key="instance_id", nullable=False),
        Column("username", String, nullable=False),
        Column("binaryWeeks", String, key="binary_weeks", nullable=False),
        Column("creationDate", String(10), key="creation_date", nullable=False),
        UniqueConstraint("instance_id", "username", name=f"uq_{name}_instance_username"),
        Index(f"ix_{name}_instance_id", "instance_id"),
    )
