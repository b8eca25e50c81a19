"""Configuration validator — deterministic checks for voice agent documents.

Usage:
    from voicecheck.validators import validation_engine

    report = validation_engine.validate(config)
    if not report.valid:
        # Report report.errors back to the caller
"""

from voicecheck.validators.engine import ValidationEngine, validation_engine
from voicecheck.validators.models import Finding, Section, Severity, ValidationReport

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "ValidationReport",
    "Finding",
    "Severity",
    "Section",
]
