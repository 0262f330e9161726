"""
API route handlers.
"""

from .bookings import BookingsHandler
from .health import HealthHandler

__all__ = [
    "BookingsHandler",
    "HealthHandler",
]
