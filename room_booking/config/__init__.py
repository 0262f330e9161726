"""
Configuration management for the room booking service.
"""

from .settings import Settings, get_settings
from .database import DatabaseConfig

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseConfig",
]
