"""
Core data models for the room booking service.
"""

from .booking import Booking, BookingCreate

__all__ = [
    "Booking",
    "BookingCreate",
]
