"""Exception hierarchy for complex-lint."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    ParsingError,
    SnapshotLoadError,
)
from .base import ComplexLintError
from .config import (
    ConfigurationError,
    InvalidConfigError,
)

__all__ = [
    "ComplexLintError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "SnapshotLoadError",
    "ConfigurationError",
    "InvalidConfigError",
]
