"""JSON formatter for complex-lint."""

import json

from .base import BaseFormatter
from ..analysis import FileAnalysis


class JsonFormatter(BaseFormatter):
    """Render the analysis as JSON."""

    def render(self, analysis: FileAnalysis) -> None:
        print(self.format(analysis))

    def format(self, analysis: FileAnalysis) -> str:
        return json.dumps(analysis.to_dict(), indent=2)
