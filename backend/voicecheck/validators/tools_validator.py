"""Tools Validator — the agent's action surface and recommended tools."""

from typing import Optional

from voicecheck.config import get_settings
from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section, Severity


class ToolsValidator(BaseValidator):
    """An agent without tools cannot act; missing recommended tools only degrade it."""

    section = Section.TOOLS

    def __init__(
        self,
        recommended_tools: Optional[list[str]] = None,
        description_length: Optional[int] = None,
    ):
        settings = get_settings()
        self.recommended_tools = (
            recommended_tools if recommended_tools is not None else list(settings.RECOMMENDED_TOOLS)
        )
        self.description_length = description_length or settings.DESCRIPTION_MAX_LENGTH

    @property
    def name(self) -> str:
        return "ToolsValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        tools = self._check_array(
            findings,
            self._get(config, "agent", "tools"),
            "agent.tools",
            empty_reason="agent cannot perform any actions",
            missing_severity=Severity.ERROR,
            empty_severity=Severity.ERROR,
        )
        if tools is None:
            return findings

        findings.append(self._passed(f"agent.tools: {len(tools)} tool(s) configured", "agent.tools"))

        tool_names = [self._get(tool, "name") for tool in tools]
        for tool_name in self.recommended_tools:
            if tool_name not in tool_names:
                findings.append(self._warning(
                    f"Recommended tool '{tool_name}' is not configured",
                    "agent.tools",
                ))

        for i, tool in enumerate(tools):
            tool_name = self._get(tool, "name")
            if self._is_missing(tool_name):
                continue
            description = self._truncate(self._get(tool, "description"), self.description_length)
            findings.append(self._info(f"{tool_name}: {description}...", f"agent.tools[{i}]"))

        return findings
