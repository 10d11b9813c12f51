"""Pydantic Schemas — request/response contracts for the instance endpoints.

Invariants:
    - Schemas validate shape at the system boundary; business rules live in core/
    - Wire names are camelCase (instanceId, binaryWeeks, creationDate)

Design Decisions:
    - Separate from the stored record: schemas are API contracts, StoredInstance is persistence
"""
