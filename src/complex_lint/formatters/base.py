"""Base formatter interface for complex-lint output rendering."""

from abc import ABC, abstractmethod

from ..analysis import FileAnalysis


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, analysis: FileAnalysis) -> None:
        """Write the formatted analysis to stdout."""

    @abstractmethod
    def format(self, analysis: FileAnalysis) -> str:
        """Return formatted string representation of the analysis."""
