"""Workflow Validator — conversation flow graph nodes and their edges."""

from voicecheck.validators.base import BaseValidator
from voicecheck.validators.models import Finding, Section


class WorkflowValidator(BaseValidator):
    """Validates workflow.nodes, a mapping of node id → node definition.

    A missing workflow is tolerated (warning). Once a workflow is declared it
    must define at least one node.
    """

    section = Section.WORKFLOW

    @property
    def name(self) -> str:
        return "WorkflowValidator"

    def validate(self, config: dict) -> list[Finding]:
        findings = []

        workflow = self._get(config, "workflow")
        if self._is_missing(workflow):
            findings.append(self._warning("workflow configuration is missing", "workflow"))
            return findings

        nodes = self._get(workflow, "nodes")
        if self._is_missing(nodes):
            findings.append(self._error("workflow.nodes is missing", "workflow.nodes"))
            return findings

        if not isinstance(nodes, dict):
            findings.append(self._error("workflow.nodes must be an object", "workflow.nodes"))
            return findings

        if len(nodes) == 0:
            findings.append(self._error("workflow.nodes is empty - no conversation flow defined", "workflow.nodes"))
            return findings

        findings.append(self._passed(f"workflow.nodes: {len(nodes)} node(s) configured", "workflow.nodes"))

        empty_edge_orders = sum(
            1 for node in nodes.values()
            if isinstance(self._get(node, "edge_order"), list) and len(node["edge_order"]) == 0
        )
        if empty_edge_orders > 0:
            findings.append(self._warning(
                f"{empty_edge_orders} node(s) have empty edge_order arrays - may affect conversation flow",
                "workflow.nodes",
            ))

        return findings
