"""Evaluation Validator — criteria used to score conversation quality."""

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class EvaluationValidator(BaseValidator):

    section = Section.EVALUATION

    @property
    def name(self) -> str:
        return "EvaluationValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        criteria = self._check_array(
            findings,
            self._get(config, "evaluation", "criteria"),
            "evaluation.criteria",
            empty_reason="conversation quality cannot be evaluated",
        )
        if criteria is None:
            return findings

        noun = "criterion" if len(criteria) == 1 else "criteria"
        findings.append(self._passed(
            f"evaluation.criteria: {len(criteria)} {noun} configured",
            "evaluation.criteria",
        ))

        for i, criterion in enumerate(criteria):
            criterion_name = self._get(criterion, "name")
            if self._is_missing(criterion_name):
                continue
            criterion_type = self._get(criterion, "type") or "unspecified"
            findings.append(self._info(f"{criterion_name} ({criterion_type})", f"evaluation.criteria[{i}]"))

        return findings
