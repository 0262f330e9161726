"""
FastAPI application factory and configuration.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from pymongo import AsyncMongoClient

from ..config import DatabaseConfig, Settings, get_settings
from ..core.exceptions import StoreError
from ..services.store import BookingStore
from ..utils.logging import configure_logging, get_logger
from .errors import register_error_handlers
from .handlers import BookingsHandler, HealthHandler
from .middleware import LoggingMiddleware, SecurityHeaders

logger = get_logger("room_booking.app")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookingStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    When ``store`` is omitted a MongoDB client is built from ``settings`` and
    owned by the application: it is pinged on startup and closed on shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    client: Optional[AsyncMongoClient] = None
    if store is None:
        db_config = DatabaseConfig.from_settings(settings)
        client = db_config.create_client()
        store = BookingStore(db_config.get_collection(client), timeout=settings.store_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await store.ping()
        except StoreError as e:
            logger.error(f"store unreachable at startup: {e}")
            if client is not None:
                await client.close()
            raise
        logger.info(f"store reachable, serving {settings.app_name} {settings.app_version}")
        try:
            yield
        finally:
            if client is not None:
                await client.close()

    app = FastAPI(
        title=settings.app_name,
        description="Room booking record manager",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Add custom middleware
    app.add_middleware(SecurityHeaders)
    app.add_middleware(LoggingMiddleware)

    # Initialize handlers
    health_handler = HealthHandler(settings, store)
    bookings_handler = BookingsHandler(store)

    # Register routes
    app.include_router(health_handler.router, prefix="/health", tags=["health"])
    app.include_router(bookings_handler.router, prefix="/bookings", tags=["bookings"])

    return app
