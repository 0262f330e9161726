"""
Translation of service errors into HTTP responses.
"""

from typing import Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.exceptions import BookingServiceError, StoreError
from ..utils.logging import get_logger

logger = get_logger("room_booking.errors")

NOT_FOUND = "not_found"
INTERNAL = "internal"


def classify(exc: Exception) -> Tuple[int, str]:
    """Map an error to its HTTP status and category.

    Only a store-reported missing record is NotFound; everything else,
    including malformed request payloads, is Internal.
    """
    if isinstance(exc, StoreError) and exc.is_not_found:
        return status.HTTP_404_NOT_FOUND, NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL


def error_response(request: Request, exc: Exception) -> JSONResponse:
    status_code, category = classify(exc)
    path = f"{request.method} {request.url.path}"
    if status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"{path}: {exc}")
    else:
        logger.error(f"{path}: {exc}", exc_info=exc)
    return JSONResponse(
        {"error": category, "detail": str(exc)},
        status_code=status_code,
    )


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Translate exceptions no handler claimed into Internal responses.

    Installed innermost so the response still passes through the security
    and access-log middleware.
    """

    async def dispatch(self, request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error translator on ``app``.

    Must run before any other middleware is added.
    """

    @app.exception_handler(BookingServiceError)
    async def booking_error_handler(request: Request, exc: BookingServiceError) -> JSONResponse:
        return error_response(request, exc)

    app.add_middleware(UnhandledErrorMiddleware)
