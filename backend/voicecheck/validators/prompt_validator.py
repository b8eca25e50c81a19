"""Prompt Validator — opening line, system prompt, and language model."""

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class PromptValidator(BaseValidator):
    """Checks the three fields an agent needs to hold a conversation.

    Each field is checked independently; one missing field never hides another.
    """

    section = Section.PROMPT

    @property
    def name(self) -> str:
        return "PromptValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        agent = self._get(config, "agent")
        if self._is_missing(agent):
            findings.append(self._error("agent configuration is missing", "agent"))
            return findings

        if self._is_missing(self._get(agent, "first_message")):
            findings.append(self._error(
                "agent.first_message is missing - agent cannot start conversations",
                "agent.first_message",
            ))
        else:
            findings.append(self._passed("agent.first_message is configured", "agent.first_message"))

        # "prompt" is both the sub-object and the instruction text inside it
        if self._is_missing(self._get(agent, "prompt", "prompt")):
            findings.append(self._error(
                "agent.prompt.prompt is missing - agent has no instructions",
                "agent.prompt.prompt",
            ))
        else:
            findings.append(self._passed("agent.prompt.prompt is configured", "agent.prompt.prompt"))

        llm = self._get(agent, "prompt", "llm")
        if self._is_missing(llm):
            findings.append(self._error(
                "agent.prompt.llm is missing - no language model specified",
                "agent.prompt.llm",
            ))
        else:
            findings.append(self._passed(f"agent.prompt.llm: {llm}", "agent.prompt.llm"))

        return findings
