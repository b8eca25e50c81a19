"""Base validator — abstract class implementing the Strategy Pattern.

Each section check is a standalone, independently testable unit.
New checks are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from voicecheck.validators.models import Finding, Section, Severity


class BaseValidator(ABC):
    """Abstract base for all section checks.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never raises for malformed document content
        - validate() returns findings in the order the checks were made
        - No I/O, no shared state between calls
    """

    section: Section

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, config: dict) -> list[Finding]:
        """Run this section's checks against the parsed configuration document.

        Args:
            config: Parsed agent configuration (read-only)

        Returns:
            Errors, warnings, pass notes and detail lines for this section
        """
        ...

    # ── Helper Methods ──

    def _finding(self, severity: Severity, message: str, field: Optional[str] = None) -> Finding:
        return Finding(severity=severity, message=message, section=self.section, field=field)

    def _error(self, message: str, field: Optional[str] = None) -> Finding:
        return self._finding(Severity.ERROR, message, field)

    def _warning(self, message: str, field: Optional[str] = None) -> Finding:
        return self._finding(Severity.WARNING, message, field)

    def _passed(self, message: str, field: Optional[str] = None) -> Finding:
        return self._finding(Severity.PASS, message, field)

    def _info(self, message: str, field: Optional[str] = None) -> Finding:
        return self._finding(Severity.INFO, message, field)

    def _get(self, config: Any, *path: str) -> Any:
        """Safely walk nested keys. Any absent or non-object ancestor yields None."""
        value = config
        for key in path:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value

    def _is_missing(self, value: Any) -> bool:
        """Treat None, False, 0 and "" as missing. Arrays and objects count as present even when empty."""
        if isinstance(value, (list, dict)):
            return False
        return not value

    def _truncate(self, value: Any, length: int) -> str:
        if value is None:
            return ""
        return str(value)[:length]

    def _check_array(
        self,
        findings: list[Finding],
        value: Any,
        field: str,
        empty_reason: str,
        missing_severity: Severity = Severity.WARNING,
        empty_severity: Severity = Severity.WARNING,
    ) -> Optional[list]:
        """Apply the absent → wrong type → empty ladder to an array field.

        A wrong type is always an error. Appends at most one finding.

        Returns:
            The array when it is present and non-empty, otherwise None
        """
        if self._is_missing(value):
            findings.append(self._finding(missing_severity, f"{field} is missing", field))
            return None

        if not isinstance(value, list):
            findings.append(self._error(f"{field} must be an array", field))
            return None

        if len(value) == 0:
            findings.append(self._finding(empty_severity, f"{field} is empty - {empty_reason}", field))
            return None

        return value
