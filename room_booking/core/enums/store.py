"""
Store-related enums.
"""

from enum import Enum


class StoreErrorKind(str, Enum):
    """Outcome classes reported by the booking store."""

    NOT_FOUND = "not_found"
    OTHER = "other"
