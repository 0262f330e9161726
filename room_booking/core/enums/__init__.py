"""
Enumerations for the room booking service.
"""

from .store import StoreErrorKind

__all__ = [
    "StoreErrorKind",
]
