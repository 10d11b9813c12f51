"""SQLAlchemy Declarative Base — shared metadata for all tables.

Invariants:
    - Every table registers on Base.metadata
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models and migrations
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all availability tables."""
    pass
