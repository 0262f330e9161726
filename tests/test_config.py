"""
Tests for configuration and logging setup.
"""

import logging

from unittest.mock import MagicMock

from room_booking.config import DatabaseConfig, Settings
from room_booking.utils.logging import get_logger


class TestSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)
        monkeypatch.delenv("DATABASE_NAME", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "mongodb://localhost:27017/"
        assert settings.database_name == "booking"
        assert settings.collection_name == "booking"
        assert settings.port == 8000

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "mongodb://db.internal:27017/")
        monkeypatch.setenv("DATABASE_NAME", "rooms")
        monkeypatch.setenv("STORE_TIMEOUT", "2.5")
        settings = Settings(_env_file=None)
        assert settings.database_url == "mongodb://db.internal:27017/"
        assert settings.database_name == "rooms"
        assert settings.store_timeout == 2.5


class TestDatabaseConfig:
    """Test database config derivation."""

    def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            database_url="mongodb://example:27017/",
            database_name="rooms",
            server_selection_timeout_ms=1500,
        )
        config = DatabaseConfig.from_settings(settings)
        assert config.url == "mongodb://example:27017/"
        assert config.database_name == "rooms"
        assert config.collection_name == "booking"
        assert config.server_selection_timeout_ms == 1500

    def test_get_collection(self):
        client = MagicMock()
        config = DatabaseConfig(database_name="rooms", collection_name="booking")
        collection = config.get_collection(client)
        client.__getitem__.assert_called_once_with("rooms")
        assert collection is client["rooms"]["booking"]


def test_get_logger_namespaces():
    assert get_logger("store").name == "room_booking.store"
    assert get_logger("room_booking.app").name == "room_booking.app"
    assert isinstance(get_logger("x"), logging.Logger)
