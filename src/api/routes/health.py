"""Health check endpoint."""

from datetime import datetime
from fastapi import APIRouter, status

from api.config import SERVICE_VERSION
from api.errors import envelope
from api.models import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def health():
    """Report liveness; always succeeds."""
    payload = HealthResponse(
        status="healthy",
        timestamp=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        version=SERVICE_VERSION,
    )
    return envelope(status.HTTP_200_OK, "service healthy", payload)
