"""Tables — SQLAlchemy definitions for persisted records.

Invariants:
    - All tables register on Base.metadata (db/base.py)
"""
