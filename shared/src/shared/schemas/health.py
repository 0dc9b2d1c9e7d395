"""Health check response schema."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for /healthz."""

    status: str  # "ok" | "unhealthy"
    service: str = ""
