"""Plain text formatter: one labelled block per function."""

from .base import BaseFormatter
from ..analysis import ComplexityReport, FileAnalysis


def format_report(report: ComplexityReport) -> str:
    return "\n".join(
        [
            "",
            f'Function "{report.name}" analysis:',
            f" - input state space: {report.input_state_space}",
            f" - output state space: {report.output_state_space}",
            f" - branching factor: {report.branching_factor}",
            f" - operational complexity: {report.operational_complexity}",
            f" - local assignment: {report.local_assignment_count}",
        ]
    )


class TextFormatter(BaseFormatter):
    """Render reports in declaration order, as plain text."""

    def render(self, analysis: FileAnalysis) -> None:
        output = self.format(analysis)
        if output:
            print(output)

    def format(self, analysis: FileAnalysis) -> str:
        return "\n".join(format_report(r) for r in analysis.reports)
