"""
Main application entry point for the room booking service.
"""

import uvicorn

from .api.app import create_app
from .config import get_settings

# Create the FastAPI application
app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "room_booking.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
