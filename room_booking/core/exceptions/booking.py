"""
Booking-related exceptions.
"""

from ..enums import StoreErrorKind


class BookingServiceError(Exception):
    """Base exception for booking service errors."""
    pass


class BindError(BookingServiceError):
    """Exception raised when a request payload cannot be bound to a booking."""
    pass


class StoreError(BookingServiceError):
    """Exception raised by the booking store, tagged with its outcome kind."""

    def __init__(self, kind: StoreErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    @classmethod
    def not_found(cls, booking_id: str) -> "StoreError":
        return cls(StoreErrorKind.NOT_FOUND, f"no booking with id {booking_id!r}")

    @property
    def is_not_found(self) -> bool:
        return self.kind is StoreErrorKind.NOT_FOUND
