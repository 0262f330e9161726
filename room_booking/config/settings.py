"""
Application settings and configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Room Booking Service"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Database
    database_url: str = Field(default="mongodb://localhost:27017/")
    database_name: str = Field(default="booking")
    collection_name: str = Field(default="booking")
    store_timeout: float = Field(default=10.0, gt=0)
    server_selection_timeout_ms: int = Field(default=5000, gt=0)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
