"""
Request logging middleware.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware

from ...utils.logging import get_logger

logger = get_logger("room_booking.access")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and duration."""

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        resp = await call_next(request)
        elapsed = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {resp.status_code} {elapsed:.1f}ms")
        return resp
