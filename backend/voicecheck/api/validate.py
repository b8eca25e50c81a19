"""Validation API — run the engine over a posted configuration document."""

from typing import Any

from fastapi import APIRouter, Body

import structlog

from voicecheck.validators import ValidationReport, validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidationReport)
async def validate_config(config: dict[str, Any] = Body(..., description="Agent configuration document")):
    """Validate a configuration document.

    Always returns 200 with the report; check `valid` for the verdict.
    Bodies that are not JSON objects are rejected with 422.
    """
    report = validation_engine.validate(config)
    logger.info("validate_request_complete", verdict=report.verdict, errors=report.error_count)
    return report
