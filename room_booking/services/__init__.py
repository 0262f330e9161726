"""
Service layer for the room booking service.
"""

from .store import BookingStore

__all__ = [
    "BookingStore",
]
