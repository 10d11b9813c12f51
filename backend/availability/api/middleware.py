"""Request Middleware — correlation id and access log for every request.

Invariants:
    - Every response carries X-Request-ID (echoed when supplied, else generated)
    - The id is visible to all log records emitted while handling the request
    - One access log line per request with method, path, status, duration
    - An exception escaping the app becomes the generic 500 here, so the
      correlation id reaches failed responses too

Design Decisions:
    - BaseHTTPMiddleware: request/response hooks without writing raw ASGI
    - Client address comes from request.client; uvicorn resolves proxy headers
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from availability.api.error_handlers import internal_error_content
from availability.infrastructure.request_context import reset_request_id, set_request_id

logger = logging.getLogger("availability.access")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assign a request id and log the outcome of each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = set_request_id(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{request.method} {request.url.path} failed",
                extra=self._log_fields(request, 500, start),
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content=internal_error_content(),
                headers={REQUEST_ID_HEADER: request_id},
            )
        else:
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                f"{request.method} {request.url.path} {response.status_code}",
                extra=self._log_fields(request, response.status_code, start),
            )
            return response
        finally:
            reset_request_id(token)

    @staticmethod
    def _log_fields(request: Request, status_code: int, start: float) -> dict:
        return {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round((time.perf_counter() - start) * 1000, 2),
            "client": request.client.host if request.client else None,
        }
