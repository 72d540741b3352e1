"""Analysis orchestration and report records."""

from .engine import ComplexityAnalyzer
from .models import ComplexityReport, FileAnalysis

__all__ = ["ComplexityAnalyzer", "ComplexityReport", "FileAnalysis"]
