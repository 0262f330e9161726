"""
Database configuration and connection management.
"""

from datetime import timezone

from pydantic import BaseModel
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from .settings import Settings


class DatabaseConfig(BaseModel):
    """MongoDB connection settings."""

    url: str = "mongodb://localhost:27017/"
    database_name: str = "booking"
    collection_name: str = "booking"
    server_selection_timeout_ms: int = 5000

    @classmethod
    def from_settings(cls, settings: Settings) -> "DatabaseConfig":
        """Build the database config from application settings."""
        return cls(
            url=settings.database_url,
            database_name=settings.database_name,
            collection_name=settings.collection_name,
            server_selection_timeout_ms=settings.server_selection_timeout_ms,
        )

    def create_client(self) -> AsyncMongoClient:
        """Create a driver client. No connection is made until first use."""
        return AsyncMongoClient(
            self.url,
            tz_aware=True,
            tzinfo=timezone.utc,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
        )

    def get_collection(self, client: AsyncMongoClient) -> AsyncCollection:
        """Get the bookings collection from a client."""
        return client[self.database_name][self.collection_name]
