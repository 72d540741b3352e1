"""Structural metrics counter for function bodies.

One traversal over the body's syntax tree tallies three counters:

    branching_factor        decision constructs (if, switch, for)
    operational_complexity  binary operations, calls and assignments
    local_assignment_count  assignments

Each construct counts once per occurrence, independent of nesting depth or
of how many branches/cases it has. Assignments are counted by both of the
last two counters.

Two bindings have no statement node of their own in the Go grammar but are
assignments all the same: ``v := x.(type)`` in a type switch header (the
``alias`` field) and ``v := <-ch`` / ``v = <-ch`` in a select case (the
``left`` field of ``receive_statement``). Each counts as one operation and
one local assignment whenever assignments are counted at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from tree_sitter import Node

from ..config import AnalysisConfig


# node type -> field holding the bound names
_BINDING_FIELDS = {
    "type_switch_statement": "alias",
    "receive_statement": "left",
}


def _binds(node: Node) -> bool:
    field_name = _BINDING_FIELDS.get(node.type)
    return field_name is not None and node.child_by_field_name(field_name) is not None


@dataclass(frozen=True)
class StructuralMetrics:
    """Counters for one function body."""

    branching_factor: int = 0
    operational_complexity: int = 0
    local_assignment_count: int = 0


class StructuralCounter:
    """Counts decision points, operations and assignments in a body.

    Args:
        branch_types: Node types counted as decision points
        operation_types: Node types counted as operations
        assignment_types: Node types counted as local assignments
    """

    def __init__(
        self,
        branch_types: Iterable[str],
        operation_types: Iterable[str],
        assignment_types: Iterable[str],
    ) -> None:
        self._branch_types = frozenset(branch_types)
        self._operation_types = frozenset(operation_types)
        self._assignment_types = frozenset(assignment_types)

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> StructuralCounter:
        return cls(
            config.branch_node_types,
            config.operation_node_types,
            config.assignment_node_types,
        )

    def count(self, body: Optional[Node]) -> StructuralMetrics:
        """Walk every named node of body once and return the tallies."""
        if body is None:
            return StructuralMetrics()

        branches = operations = assignments = 0
        stack = [body]
        while stack:
            node = stack.pop()
            kind = node.type
            if kind in self._branch_types:
                branches += 1
            if kind in self._operation_types:
                operations += 1
            if kind in self._assignment_types:
                assignments += 1
            elif self._assignment_types and _binds(node):
                operations += 1
                assignments += 1
            stack.extend(node.named_children)

        return StructuralMetrics(
            branching_factor=branches,
            operational_complexity=operations,
            local_assignment_count=assignments,
        )


def count_structure(body: Optional[Node], config: Optional[AnalysisConfig] = None) -> StructuralMetrics:
    """Count structural metrics with the configured (or default) node types."""
    return StructuralCounter.from_config(config or AnalysisConfig()).count(body)
