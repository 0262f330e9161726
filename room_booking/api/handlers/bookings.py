"""
Booking resource handler.
"""

from typing import List

from fastapi import APIRouter, Request
from pydantic import ValidationError

from ...core.exceptions import BindError
from ...core.models.booking import Booking, BookingCreate
from ...services.store import BookingStore


def sort_by_start(bookings: List[Booking]) -> List[Booking]:
    """Order bookings by start time; ties keep their store order."""
    return sorted(bookings, key=lambda booking: booking.start)


async def bind_booking(request: Request) -> BookingCreate:
    """Bind the JSON request body to a booking payload."""
    try:
        body = await request.json()
    except ValueError as e:
        raise BindError(f"invalid JSON body: {e}") from e

    try:
        return BookingCreate.model_validate(body)
    except ValidationError as e:
        raise BindError(f"invalid booking payload: {e}") from e


class BookingsHandler:
    """Handler for the booking create/list/get/delete endpoints."""

    def __init__(self, store: BookingStore):
        self.store = store
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup booking routes."""

        @self.router.post("", response_model=Booking)
        async def create_booking(request: Request) -> Booking:
            """Create a booking; the store assigns its id."""
            payload = await bind_booking(request)
            booking_id = await self.store.insert(payload)
            return Booking(id=booking_id, **payload.model_dump())

        @self.router.get("", response_model=List[Booking])
        async def list_bookings() -> List[Booking]:
            """List all bookings ordered by start time."""
            bookings = await self.store.find_all()
            return sort_by_start(bookings)

        @self.router.get("/{booking_id}", response_model=Booking)
        async def get_booking(booking_id: str) -> Booking:
            """Fetch a single booking."""
            return await self.store.find_by_id(booking_id)

        @self.router.delete("/{booking_id}")
        async def delete_booking(booking_id: str) -> str:
            """Delete a booking."""
            await self.store.delete_by_id(booking_id)
            return ""
