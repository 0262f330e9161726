"""
Pytest configuration and fixtures.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import Mock, AsyncMock

from room_booking.api.app import create_app
from room_booking.config import Settings
from room_booking.services.store import BookingStore
from tests.helpers import FakeCursor, InMemoryBookingStore


@pytest.fixture
def mock_collection():
    """Mock bookings collection."""
    collection = Mock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.delete_one = AsyncMock(return_value=Mock(deleted_count=0))
    collection.find = Mock(return_value=FakeCursor([]))
    collection.database.command = AsyncMock(return_value={"ok": 1.0})
    return collection


@pytest.fixture
def booking_store(mock_collection):
    """Booking store over the mocked collection."""
    return BookingStore(mock_collection, timeout=1.0)


@pytest.fixture
def settings():
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def memory_store():
    return InMemoryBookingStore()


@pytest.fixture
def app(settings, memory_store):
    """Application wired to the in-memory store."""
    return create_app(settings, memory_store)


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the application in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def alice_payload():
    return {
        "name": "Alice",
        "room": "101",
        "start": "2024-01-01T10:00:00Z",
        "end": "2024-01-01T11:00:00Z",
    }
