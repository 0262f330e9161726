"""
Logging setup shared across the service.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the ``room_booking`` logger."""
    global _configured
    root = logging.getLogger("room_booking")
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``room_booking``."""
    if not name.startswith("room_booking"):
        name = f"room_booking.{name}"
    return logging.getLogger(name)
