"""Tests for the workflow check."""

import pytest

from conftest import by_severity
from voicecheck.validators.workflow_validator import WorkflowValidator


@pytest.fixture
def validator() -> WorkflowValidator:
    return WorkflowValidator()


def test_missing_workflow_is_a_warning(validator) -> None:
    findings = validator.validate({})

    assert [f.message for f in findings] == ["workflow configuration is missing"]
    assert findings[0].severity == "warning"


@pytest.mark.parametrize(
    "workflow, expected",
    [
        ({"name": "flow"}, "workflow.nodes is missing"),
        ({"nodes": {}}, "workflow.nodes is empty - no conversation flow defined"),
        ({"nodes": ["start"]}, "workflow.nodes must be an object"),
    ],
)
def test_bad_nodes_are_errors(validator, workflow, expected) -> None:
    findings = validator.validate({"workflow": workflow})

    assert [f.message for f in findings] == [expected]
    assert findings[0].severity == "error"


def test_empty_edge_orders_aggregate_into_one_warning(validator) -> None:
    config = {
        "workflow": {
            "nodes": {
                "start": {"edge_order": []},
                "middle": {"edge_order": ["a"]},
                "end": {"edge_order": []},
            }
        }
    }

    findings = validator.validate(config)

    assert by_severity(findings, "pass") == ["workflow.nodes: 3 node(s) configured"]
    assert by_severity(findings, "warning") == [
        "2 node(s) have empty edge_order arrays - may affect conversation flow"
    ]


def test_absent_or_non_array_edge_order_is_not_counted(validator) -> None:
    config = {"workflow": {"nodes": {"a": {}, "b": {"edge_order": "x"}, "c": "node"}}}

    findings = validator.validate(config)

    assert by_severity(findings, "warning") == []
    assert by_severity(findings, "pass") == ["workflow.nodes: 3 node(s) configured"]
