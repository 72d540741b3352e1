"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

# Reports go to stdout through the formatters; messages go here.
console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if output_format is not None:
        overrides["output_format"] = output_format
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
