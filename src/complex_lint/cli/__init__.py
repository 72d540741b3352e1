"""CLI entry point."""

import typer

app = typer.Typer(
    name="complex-lint",
    help="complex-lint - state-space and structural complexity of Go functions",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from . import analyze as _analyze  # noqa: F401, E402


def main() -> None:
    app()
