"""Public API for complex-lint.

Example:
    >>> from complex_lint import analyze
    >>>
    >>> result = analyze("main.go")
    >>> for report in result.reports:
    ...     print(report.name, report.input_state_space)
    >>>
    >>> # With customization
    >>> result = analyze("main.go", weights={"sequence_length": 1000})
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analysis import ComplexityAnalyzer, FileAnalysis
from .config import load_config
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path],
    package_dir: Optional[Union[str, Path]] = None,
    config_file: Optional[Path] = None,
    **overrides,
) -> FileAnalysis:
    """Analyze every function of a Go file.

    Steps:
    1. Load configuration (auto-discover TOML + apply overrides)
    2. Read and parse the file
    3. Load the package symbol snapshot
    4. Produce one ComplexityReport per function, in declaration order

    Args:
        path: Go source file
        package_dir: Directory of the enclosing package (default: the
            file's directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., include_methods=False)

    Returns:
        FileAnalysis with the reports

    Raises:
        ConfigurationError: If configuration is invalid
        FileAccessError: If the file cannot be read
        ParsingError: If the file is not valid Go
        SnapshotLoadError: If the package symbols cannot be loaded
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Analyzing {path} with weights {config.weights}")
    return ComplexityAnalyzer(config).analyze_file(path, package_dir=package_dir)
