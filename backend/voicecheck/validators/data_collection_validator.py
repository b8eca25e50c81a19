"""Data Collection Validator — fields extracted from each conversation."""

from typing import Optional

from voicecheck.config import get_settings
from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class DataCollectionValidator(BaseValidator):
    """Without data collection the agent runs but reports no metrics."""

    section = Section.DATA_COLLECTION

    def __init__(self, description_length: Optional[int] = None):
        self.description_length = description_length or get_settings().DESCRIPTION_SHORT_LENGTH

    @property
    def name(self) -> str:
        return "DataCollectionValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        fields = self._check_array(
            findings,
            self._get(config, "data_collection"),
            "data_collection",
            empty_reason="agent will not collect metrics",
        )
        if fields is None:
            return findings

        findings.append(self._passed(f"data_collection: {len(fields)} field(s) configured", "data_collection"))

        for i, item in enumerate(fields):
            field_id = self._get(item, "id")
            if self._is_missing(field_id):
                continue
            field_type = self._get(item, "type") or "unspecified"
            description = self._truncate(self._get(item, "description"), self.description_length)
            findings.append(self._info(f"{field_id} ({field_type}): {description}...", f"data_collection[{i}]"))

        return findings
