"""Validation Engine — runs every section check in order and builds the report.

This is the main entry point for configuration validation. The document must
already be parsed; loading and JSON decoding happen in voicecheck.loader.

Usage:
    engine = ValidationEngine()
    report = engine.validate(config)
    if not report.valid:
        # Show report.errors to the user
"""

import time
from typing import Optional

import structlog

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Severity, ValidationReport

# Import all validators
from voicecheck.validators.tts_validator import TTSValidator
from voicecheck.validators.language_validator import LanguageValidator
from voicecheck.validators.tools_validator import ToolsValidator
from voicecheck.validators.knowledge_base_validator import KnowledgeBaseValidator
from voicecheck.validators.data_collection_validator import DataCollectionValidator
from voicecheck.validators.evaluation_validator import EvaluationValidator
from voicecheck.validators.workflow_validator import WorkflowValidator
from voicecheck.validators.prompt_validator import PromptValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Orchestrates all section checks and produces a unified validation report.

    Design principles:
        - Deterministic: same document → same ordered findings
        - Independent: every check runs, whatever earlier checks found
        - Extensible: add checks without modifying the engine
        - Observable: logs every validation run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with the default check chain or a custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = validators if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default check chain in execution order."""
        return [
            TTSValidator(),
            LanguageValidator(),       # Reads tts.supported_voices for the cross-check
            ToolsValidator(),
            KnowledgeBaseValidator(),
            DataCollectionValidator(),
            EvaluationValidator(),
            WorkflowValidator(),
            PromptValidator(),
        ]

    def validate(self, config: dict) -> ValidationReport:
        """Run all checks against the document and produce a report.

        Args:
            config: Parsed agent configuration document

        Returns:
            ValidationReport with errors, warnings, pass notes and details
        """
        start_time = time.perf_counter()

        if not isinstance(config, dict):
            logger.warning("config_not_an_object", received_type=type(config).__name__)
            config = {}

        all_findings: list[Finding] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                findings = validator.validate(config)
                all_findings.extend(findings)
                logger.debug(
                    "section_checked",
                    validator=validator.name,
                    errors=sum(1 for f in findings if f.severity == Severity.ERROR),
                    warnings=sum(1 for f in findings if f.severity == Severity.WARNING),
                )
            except Exception as e:
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                # Don't let one broken check stop the rest
                all_findings.append(Finding(
                    severity=Severity.ERROR,
                    message=f"Validator '{validator.name}' crashed: {e}",
                    section=validator.section,
                ))
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

        report = ValidationReport.build(all_findings)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            verdict=report.verdict,
            errors=report.error_count,
            warnings=report.warning_count,
            passed=len(report.passed),
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return report

    def add_validator(self, validator: BaseValidator) -> None:
        """Append a custom check to the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a check by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]


# Module-level singleton
validation_engine = ValidationEngine()
