"""Common DTOs and schemas."""
from shared.schemas.health import HealthResponse
from shared.schemas.request_context import RequestContext

__all__ = ["HealthResponse", "RequestContext"]
