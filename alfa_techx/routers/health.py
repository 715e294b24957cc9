# =============================================================================
# alfa_techx/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides the health check endpoint for monitoring and load balancers.
# Mounted under /api, so the full path is /api/health (GET and HEAD).
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()

HEALTH_MESSAGE = "Alfa TechX API is running!"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    success: bool
    message: str
    timestamp: str


def utc_timestamp() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision.

    Example: "2024-01-15T10:30:00.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# =============================================================================
# Endpoints
# =============================================================================

@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns 200 whenever the process is serving requests, in every runtime mode.
    """
    return HealthResponse(
        success=True,
        message=HEALTH_MESSAGE,
        timestamp=utc_timestamp(),
    )
