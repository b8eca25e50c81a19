"""Tests for the agent tools check."""

import pytest

from conftest import by_severity
from voicecheck.validators.tools_validator import ToolsValidator


@pytest.fixture
def validator() -> ToolsValidator:
    return ToolsValidator(recommended_tools=["end_call", "language_detection"], description_length=60)


def test_configured_tools_pass(validator, valid_config) -> None:
    findings = validator.validate(valid_config)

    assert by_severity(findings, "pass") == ["agent.tools: 2 tool(s) configured"]
    assert by_severity(findings, "warning") == []
    assert by_severity(findings, "error") == []


def test_empty_tools_is_one_error_and_stops(validator, valid_config) -> None:
    """No recommended-tool warnings once the array is empty."""
    valid_config["agent"]["tools"] = []

    findings = validator.validate(valid_config)

    assert len(findings) == 1
    assert findings[0].severity == "error"
    assert "cannot perform any actions" in findings[0].message


@pytest.mark.parametrize(
    "tools, expected",
    [
        (None, "agent.tools is missing"),
        ({"name": "end_call"}, "agent.tools must be an array"),
    ],
)
def test_missing_or_wrong_type_tools(validator, valid_config, tools, expected) -> None:
    valid_config["agent"]["tools"] = tools

    assert by_severity(validator.validate(valid_config), "error") == [expected]


def test_missing_agent_reports_missing_tools(validator) -> None:
    assert by_severity(validator.validate({}), "error") == ["agent.tools is missing"]


def test_each_missing_recommended_tool_is_a_warning(validator, valid_config) -> None:
    valid_config["agent"]["tools"] = [{"name": "transfer_to_human", "description": "Hands off"}]

    warnings = by_severity(validator.validate(valid_config), "warning")

    assert warnings == [
        "Recommended tool 'end_call' is not configured",
        "Recommended tool 'language_detection' is not configured",
    ]


def test_tool_details_truncate_description(validator, valid_config) -> None:
    valid_config["agent"]["tools"] = [
        {"name": "end_call", "description": "x" * 100},
        {"description": "nameless tool is not listed"},
        {"name": "language_detection"},
    ]

    details = by_severity(validator.validate(valid_config), "info")

    assert details == ["end_call: " + "x" * 60 + "...", "language_detection: ..."]


def test_recommended_tools_are_configurable(valid_config) -> None:
    validator = ToolsValidator(recommended_tools=["transfer_to_human"])

    warnings = by_severity(validator.validate(valid_config), "warning")

    assert warnings == ["Recommended tool 'transfer_to_human' is not configured"]
