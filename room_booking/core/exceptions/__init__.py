"""
Custom exceptions for the room booking service.
"""

from .booking import BookingServiceError, BindError, StoreError

__all__ = [
    "BookingServiceError",
    "BindError",
    "StoreError",
]
