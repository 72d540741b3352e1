"""
complex-lint - state-space and structural complexity estimates for Go functions

For every function of a Go file, estimates how large the space of input
and output values implied by its parameter and result types is, and counts
decision points, operations and local assignments in its body. The numbers
are coarse on purpose: they rank functions against each other.
"""

__version__ = "0.1.0"

from .analysis import ComplexityAnalyzer, ComplexityReport, FileAnalysis
from .api import analyze

__all__ = [
    "analyze",  # Main entry point
    "ComplexityAnalyzer",  # Advanced usage (custom snapshots, in-memory sources)
    "ComplexityReport",
    "FileAnalysis",
]
