"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from voicecheck.api.health import router as health_router
from voicecheck.api.validate import router as validate_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Configuration validation
api_router.include_router(validate_router, tags=["Validation"])
