"""Knowledge Base Validator — optional reference documents for the agent."""

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class KnowledgeBaseValidator(BaseValidator):
    """Knowledge base is optional: missing or empty is a warning, a wrong type is an error."""

    section = Section.KNOWLEDGE_BASE

    @property
    def name(self) -> str:
        return "KnowledgeBaseValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        documents = self._check_array(
            findings,
            self._get(config, "agent", "knowledge_base"),
            "agent.knowledge_base",
            empty_reason="agent lacks contextual information",
        )
        if documents is None:
            return findings

        findings.append(self._passed(
            f"agent.knowledge_base: {len(documents)} document(s) configured",
            "agent.knowledge_base",
        ))

        for i, doc in enumerate(documents):
            doc_name = self._get(doc, "name")
            if self._is_missing(doc_name):
                continue
            usage_mode = self._get(doc, "usage_mode") or "auto"
            findings.append(self._info(f"{doc_name} ({usage_mode})", f"agent.knowledge_base[{i}]"))

        return findings
