"""
Test doubles shared across the test suite.
"""

from typing import Dict, List

from bson import ObjectId
from unittest.mock import AsyncMock

from room_booking.core.exceptions import StoreError
from room_booking.core.models.booking import Booking, BookingCreate


class FakeCursor:
    """Async-iterable stand-in for a driver cursor."""

    def __init__(self, docs):
        self._docs = list(docs)
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc

    async def close(self):
        self.closed = True


class InMemoryBookingStore:
    """Booking store double keeping records in insertion order."""

    def __init__(self):
        self.records: Dict[str, Booking] = {}
        self.ping = AsyncMock(return_value=None)

    async def insert(self, booking: BookingCreate) -> str:
        booking_id = str(ObjectId())
        self.records[booking_id] = Booking(id=booking_id, **booking.model_dump())
        return booking_id

    async def find_all(self) -> List[Booking]:
        return list(self.records.values())

    async def find_by_id(self, booking_id: str) -> Booking:
        if booking_id not in self.records:
            raise StoreError.not_found(booking_id)
        return self.records[booking_id]

    async def delete_by_id(self, booking_id: str) -> None:
        if self.records.pop(booking_id, None) is None:
            raise StoreError.not_found(booking_id)
