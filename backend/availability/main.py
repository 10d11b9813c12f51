"""Availability API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AvailabilityError → structured JSON responses
    - CORS configured from settings (origin regex, not a hardcoded list)
    - Store connection verified on startup; an unreachable store aborts startup

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema auto-created outside production; production schema is owned by alembic
    - Middleware order: CORS outermost so preflights never reach the request logger
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from availability import __version__
from availability.api.error_handlers import register_error_handlers
from availability.api.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from availability.api.routes import health, instances
from availability.config import get_settings
from availability.infrastructure.database import init_db
from availability.infrastructure.observability import setup_logging
from availability.models.instance_record import instance_table

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    instance_table(settings.db_collection)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if not settings.is_production:
        await manager.create_schema()
    if not await manager.health_check():
        raise RuntimeError("Store unreachable at startup")
    logger.info(
        f"Availability API started (collection={settings.db_collection})",
    )
    yield
    await manager.close()
    logger.info("Availability API shutting down")


app = FastAPI(
    title="Availability API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=settings.cors_origin_regex,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type", "X-CSRF-Token", REQUEST_ID_HEADER],
    expose_headers=["Link", REQUEST_ID_HEADER],
    allow_credentials=False,
    max_age=300,
)

app.include_router(health.router)
app.include_router(instances.router)

register_error_handlers(app)
