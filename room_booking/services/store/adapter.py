"""
MongoDB-backed store for bookings.
"""

import asyncio
from typing import Any, Awaitable, Dict, List, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from ...core.enums import StoreErrorKind
from ...core.exceptions import StoreError
from ...core.models.booking import Booking, BookingCreate
from ...utils.logging import get_logger

T = TypeVar("T")

logger = get_logger("room_booking.store")


def _parse_object_id(booking_id: str) -> Optional[ObjectId]:
    """Parse a hex identifier, returning None when it is not a valid ObjectId."""
    try:
        return ObjectId(booking_id)
    except (InvalidId, TypeError):
        return None


class BookingStore:
    """Translates booking operations into single round trips to the collection.

    Every call is bounded by ``timeout`` seconds. Driver failures, decode
    failures and timeouts are raised as ``StoreError`` of kind ``OTHER``;
    missing records as kind ``NOT_FOUND``. Cancellation of the calling task
    is not intercepted, so the in-flight driver call is abandoned with it.
    """

    def __init__(self, collection: AsyncCollection, timeout: float = 10.0):
        self.collection = collection
        self.timeout = timeout

    async def _call(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise StoreError(
                StoreErrorKind.OTHER, f"{operation} timed out after {self.timeout}s"
            ) from e
        except PyMongoError as e:
            raise StoreError(StoreErrorKind.OTHER, f"{operation} failed: {e}") from e

    @staticmethod
    def _decode(doc: Dict[str, Any]) -> Booking:
        try:
            return Booking.from_document(doc)
        except (KeyError, ValidationError) as e:
            raise StoreError(
                StoreErrorKind.OTHER, f"malformed booking document {doc.get('_id')!r}: {e}"
            ) from e

    async def ping(self) -> None:
        """Check that the store is reachable."""
        await self._call("ping", self.collection.database.command("ping"))

    async def insert(self, booking: BookingCreate) -> str:
        """Persist a new booking and return the store-assigned id."""
        result = await self._call("insert_one", self.collection.insert_one(booking.to_document()))
        booking_id = str(result.inserted_id)
        logger.debug(f"inserted booking {booking_id}")
        return booking_id

    async def find_all(self) -> List[Booking]:
        """Return every stored booking in store-native order."""

        async def _collect() -> List[Dict[str, Any]]:
            cursor = self.collection.find({})
            try:
                return [doc async for doc in cursor]
            finally:
                await cursor.close()

        docs = await self._call("find", _collect())
        return [self._decode(doc) for doc in docs]

    async def find_by_id(self, booking_id: str) -> Booking:
        """Return the booking with ``booking_id``.

        Identifiers that are not valid ObjectIds can never match, so they
        are reported as not found rather than as a format error.
        """
        oid = _parse_object_id(booking_id)
        if oid is None:
            raise StoreError.not_found(booking_id)

        doc = await self._call("find_one", self.collection.find_one({"_id": oid}))
        if doc is None:
            raise StoreError.not_found(booking_id)
        return self._decode(doc)

    async def delete_by_id(self, booking_id: str) -> None:
        """Remove the booking with ``booking_id``; zero deletions is not found."""
        oid = _parse_object_id(booking_id)
        if oid is None:
            raise StoreError.not_found(booking_id)

        result = await self._call("delete_one", self.collection.delete_one({"_id": oid}))
        if result.deleted_count == 0:
            raise StoreError.not_found(booking_id)
        logger.debug(f"deleted booking {booking_id}")
