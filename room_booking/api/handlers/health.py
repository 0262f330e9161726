"""
Health check handler.
"""

from datetime import datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...config import Settings
from ...core.exceptions import StoreError
from ...services.store import BookingStore
from ...utils.logging import get_logger

logger = get_logger("room_booking.health")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str
    uptime: float


class HealthHandler:
    """Handler for health check endpoints."""

    def __init__(self, settings: Settings, store: BookingStore):
        self.settings = settings
        self.store = store
        self.start_time = datetime.now()
        self.router = APIRouter()
        self._setup_routes()

    def _setup_routes(self):
        """Setup health check routes."""

        @self.router.get("/", response_model=HealthResponse)
        async def health_check():
            """Basic health check endpoint."""
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy",
                timestamp=datetime.now().isoformat(),
                version=self.settings.app_version,
                uptime=uptime
            )

        @self.router.get("/ready")
        async def readiness_check():
            """Readiness check: the store must answer a ping."""
            try:
                await self.store.ping()
            except StoreError as e:
                logger.warning(f"readiness: store ping failed: {e}")
                return JSONResponse(
                    {"status": "unavailable"},
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                )
            return {"status": "ready"}

        @self.router.get("/live")
        async def liveness_check():
            """Liveness check for container orchestration."""
            return {"status": "alive"}
