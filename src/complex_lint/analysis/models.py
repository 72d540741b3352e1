"""Report records produced by the analyzer."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ComplexityReport:
    """Complexity estimate for one function.

    Attributes:
        name: Function or method name
        input_state_space: Product of the parameter type estimates (>= 1)
        output_state_space: Product of the result type estimates (>= 1)
        branching_factor: Decision constructs in the body
        operational_complexity: Binary operations, calls and assignments
        local_assignment_count: Assignments (also counted as operations)
        line: Line of the declaration (1-indexed)
        receiver: Receiver type for methods, None for functions
        unresolved_types: Type expressions that degraded to Unknown
        skipped_fields: Struct fields dropped during resolution
    """

    name: str
    input_state_space: int
    output_state_space: int
    branching_factor: int
    operational_complexity: int
    local_assignment_count: int
    line: int = 0
    receiver: Optional[str] = None
    unresolved_types: int = 0
    skipped_fields: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FileAnalysis:
    """All reports for one file, in declaration order."""

    path: str
    package: str
    reports: tuple[ComplexityReport, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "package": self.package,
            "functions": [r.to_dict() for r in self.reports],
        }
