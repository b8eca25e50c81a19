"""voicecheck HTTP service.

FastAPI application exposing the configuration validator, with lifespan
logging and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from voicecheck import __version__
from voicecheck.api.router import api_router
from voicecheck.config import get_settings
from voicecheck.logs import configure_logging

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info("app_started", version=__version__)
    yield
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="voicecheck",
    description="Validates conversational voice agent configuration documents.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "voicecheck",
        "version": __version__,
        "description": "Voice agent configuration validator",
        "docs": "/docs",
        "health": "/api/v1/health",
        "validate": "/api/v1/validate",
    }


def run() -> None:
    settings = get_settings()
    uvicorn.run("voicecheck.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
