"""
Booking store module.
"""

from .adapter import BookingStore

__all__ = [
    "BookingStore",
]
