# shiftcal/core/request_logging.py
"""
Request logging middleware for tracking all HTTP requests.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from shiftcal.core.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Paths logged at DEBUG only (polled by monitoring)
QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every HTTP request with timing and status code.

    Adds a unique request ID to each request, echoed in the X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"{request.method} {request.url.path} - 500 ({duration_ms:.2f}ms) - ERROR: {e}",
                extra=_extra(request, request_id, 500, duration_ms),
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"
        extra = _extra(request, request_id, status_code, duration_ms)

        if status_code >= 500:
            logger.error(message, extra=extra)
        elif status_code >= 400:
            logger.warning(message, extra=extra)
        elif request.url.path in QUIET_PATHS:
            logger.debug(message, extra=extra)
        else:
            logger.info(message, extra=extra)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _extra(request: Request, request_id: str, status_code: int, duration_ms: float) -> dict:
    return {
        "extra_fields": {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query": str(request.url.query),
            "status_code": status_code,
            "duration": duration_ms,
        }
    }
