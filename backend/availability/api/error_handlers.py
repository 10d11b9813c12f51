"""Error Handlers — global exception handlers for the availability API.

Invariants:
    - AvailabilityError → structured JSON with error code, message, severity
    - RequestValidationError → 400; malformed JSON reported as DECODE_ERROR
      with the decoder's message, shape errors as VALIDATION_ERROR
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain, validation (Pydantic), catch-all
    - The catch-all is the panic-recovery layer: one failing request never
      takes the process down
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from availability.core.errors import AvailabilityError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AvailabilityError)
    async def availability_error_handler(request: Request, exc: AvailabilityError):
        """Handle all availability domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"AvailabilityError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "instance_id": exc.context.instance_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle body decode and Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_content(),
        )


def internal_error_content() -> dict:
    """Body of every unexpected-failure 500."""
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": "internal",
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = exc.errors()
    decode_errors = [e for e in errors if e["type"] == "json_invalid"]
    if decode_errors:
        reason = decode_errors[0].get("ctx", {}).get("error")
        code = "DECODE_ERROR"
        message = f"Invalid JSON body: {reason}" if reason else "Invalid JSON body"
    else:
        code = "VALIDATION_ERROR"
        message = "Invalid request data"
    return {
        "error": {
            "code": code,
            "message": message,
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
