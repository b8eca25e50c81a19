"""Validation models — severities, sections, findings, and the report.

All validation is deterministic: same document → same ordered findings.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, computed_field


class Severity(str, Enum):
    """Finding severity levels."""

    ERROR = "error"      # Agent cannot speak, act, or converse
    WARNING = "warning"  # Agent works but is degraded
    PASS = "pass"        # Check succeeded
    INFO = "info"        # Observational detail, never affects the verdict


class Section(str, Enum):
    """Document sections, in execution order of the default validator chain."""

    TTS = "tts"
    LANGUAGES = "languages"
    TOOLS = "agent.tools"
    KNOWLEDGE_BASE = "agent.knowledge_base"
    DATA_COLLECTION = "data_collection"
    EVALUATION = "evaluation.criteria"
    WORKFLOW = "workflow"
    PROMPT = "agent.prompt"


SECTION_TITLES = {
    Section.TTS: "TTS Configuration",
    Section.LANGUAGES: "Language Configuration",
    Section.TOOLS: "Agent Tools",
    Section.KNOWLEDGE_BASE: "Knowledge Base",
    Section.DATA_COLLECTION: "Data Collection",
    Section.EVALUATION: "Evaluation Criteria",
    Section.WORKFLOW: "Workflow Configuration",
    Section.PROMPT: "Agent Prompt Configuration",
}


class Finding(BaseModel):
    """A single validation finding. Immutable once created."""

    severity: Severity
    message: str
    section: Section
    field: Optional[str] = None  # Which JSON field triggered this

    model_config = {"frozen": True, "use_enum_values": True}


class ValidationReport(BaseModel):
    """Outcome of one validation run.

    Built fresh for every call to the engine. Do not share a report (or the
    list of findings it was built from) between parallel runs.
    """

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)
    passed: list[Finding] = Field(default_factory=list)
    details: list[Finding] = Field(default_factory=list, description="Informational lines per section")

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    @computed_field
    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @computed_field
    @property
    def error_count(self) -> int:
        return len(self.errors)

    @computed_field
    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @computed_field
    @property
    def verdict(self) -> Literal["valid", "valid_with_warnings", "invalid"]:
        if self.errors:
            return "invalid"
        if self.warnings:
            return "valid_with_warnings"
        return "valid"

    @classmethod
    def build(cls, findings: list[Finding]) -> "ValidationReport":
        """Partition findings by severity, keeping check order within each group."""
        buckets: dict[str, list[Finding]] = {severity.value: [] for severity in Severity}
        for finding in findings:
            buckets[Severity(finding.severity).value].append(finding)

        return cls(
            errors=buckets[Severity.ERROR.value],
            warnings=buckets[Severity.WARNING.value],
            passed=buckets[Severity.PASS.value],
            details=buckets[Severity.INFO.value],
        )

    def messages(self, severity: Severity) -> list[str]:
        """Plain message strings for one severity group."""
        groups = {
            Severity.ERROR: self.errors,
            Severity.WARNING: self.warnings,
            Severity.PASS: self.passed,
            Severity.INFO: self.details,
        }
        return [f.message for f in groups[Severity(severity)]]
