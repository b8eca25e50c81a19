"""Health check endpoint."""

import time
from fastapi import APIRouter

from voicecheck import __version__
from voicecheck.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health check. The validator has no external dependencies."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
        version=__version__,
    )
