"""
Booking data models.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import AwareDatetime, BaseModel, ConfigDict

# Zero instant used for timestamps missing from a create payload.
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


class BookingCreate(BaseModel):
    """Inbound payload for creating a booking.

    Unknown keys, including a client-supplied ``id``, are ignored: the
    identifier is always assigned by the store. Missing fields take their
    zero value (empty string, or ``ZERO_TIME`` for timestamps).
    """

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    room: str = ""
    start: AwareDatetime = ZERO_TIME
    end: AwareDatetime = ZERO_TIME

    def to_document(self) -> Dict[str, Any]:
        """Get the document stored for this booking (without ``_id``)."""
        return self.model_dump()


class Booking(BookingCreate):
    """A stored booking with its store-assigned identifier."""

    model_config = ConfigDict(extra="forbid")

    id: str

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Booking":
        """Build a booking from a stored document."""
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            room=doc["room"],
            start=doc["start"],
            end=doc["end"],
        )
