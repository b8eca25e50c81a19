"""API response models."""

from pydantic import BaseModel
from typing import Literal


class HealthResponse(BaseModel):
    """Service health status."""

    status: Literal["healthy", "degraded", "unhealthy"]
    uptime_seconds: float
    version: str
