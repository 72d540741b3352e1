"""
Logging setup for complex-lint.

Reports go to stdout through the formatters. Everything logged here goes to
stderr through rich, so ``complex-lint -f json > report.json`` stays clean.
At verbose level the resolver's debug records (unresolved types, skipped
struct fields, cyclic references) become visible.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "complex_lint"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def verbosity_from_flags(verbose: bool = False, quiet: bool = False) -> str:
    """Map the CLI's --verbose/--quiet flags to a verbosity name; quiet wins."""
    if quiet:
        return "quiet"
    if verbose:
        return "verbose"
    return "normal"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stderr RichHandler (and optionally a file handler) to the
    complex_lint logger.

    Calling it again replaces the handlers instead of stacking them, so the
    CLI can be invoked repeatedly in one process.

    Args:
        verbosity: "quiet", "normal" or "verbose"
        log_file: Optional file path that receives a timestamped copy

    Returns:
        The complex_lint logger

    Raises:
        ValueError: If verbosity is not recognized
    """
    if verbosity not in _LEVELS:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    level = _LEVELS[verbosity]
    verbose = verbosity == "verbose"

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            show_time=verbose,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the complex_lint namespace ('api' -> 'complex_lint.api')."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
