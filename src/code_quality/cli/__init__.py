"""CLI entry point; registers the analysis command."""

import typer

from ._common import console  # noqa: F401

app = typer.Typer(
    name="code-quality-analysis",
    help="Code Quality Analysis - lexical source metrics and quality levels",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command module to register it
from .analyze import main as _main_command  # noqa: F401, E402


def main() -> None:
    app()
