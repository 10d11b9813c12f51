"""Infrastructure Layer — store client, repository implementation, logging.

Invariants:
    - Infrastructure never holds request state between calls
    - All store calls wrapped with timeout/error mapping

Design Decisions:
    - Resilient wrappers over raw clients: handlers only ever see AvailabilityError
"""
