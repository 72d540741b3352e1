"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from .. import __version__
from ..analysis import ComplexityAnalyzer
from ..exceptions import ComplexLintError
from ..formatters import get_formatter
from ..logging_config import setup_logging, verbosity_from_flags
from . import app
from ._common import console, resolve_config


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"complex-lint {__version__}")
        raise typer.Exit(0)


@app.command()
def run(
    path: Path = typer.Option(
        Path("example.go"),
        "--path",
        "-p",
        help="Path to the Go file to analyze",
    ),
    package_dir: Optional[Path] = typer.Option(
        None,
        "--package-dir",
        help="Directory of the enclosing package (default: the file's directory)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show resolution diagnostics",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Estimate input/output state spaces and structural complexity of every
    function in a Go file.

    [bold cyan]Examples:[/bold cyan]

      complex-lint --path main.go

      complex-lint -p internal/server/handler.go --format json

      complex-lint -p cmd/tool/main.go --package-dir cmd/tool -v
    """
    logger = setup_logging(verbosity_from_flags(verbose, quiet))

    try:
        settings = resolve_config(
            config=config,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
        )
        result = ComplexityAnalyzer(settings).analyze_file(path, package_dir=package_dir)

    except ComplexLintError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    get_formatter(settings.output_format).render(result)

    if verbose:
        for report in result.reports:
            if report.unresolved_types or report.skipped_fields:
                logger.info(
                    f"{report.name}: {report.unresolved_types} unresolved types, "
                    f"{report.skipped_fields} skipped fields"
                )
