"""API Layer — FastAPI routes, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies, errors included

Design Decisions:
    - Thin routes delegate to services/instance_service.py
"""
