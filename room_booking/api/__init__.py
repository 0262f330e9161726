"""
API layer for the room booking service.
"""

from .app import create_app
from .errors import register_error_handlers
from .middleware import SecurityHeaders, LoggingMiddleware

__all__ = [
    "create_app",
    "register_error_handlers",
    "SecurityHeaders",
    "LoggingMiddleware",
]
