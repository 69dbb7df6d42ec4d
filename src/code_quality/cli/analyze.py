"""Main analysis command."""

from pathlib import Path
from typing import List, Optional

import click
import typer

from ..analysis import AnalysisResult, analyze_path
from ..exceptions import CodeQualityError, InvalidPathError
from ..formatters import FORMATTERS, get_formatter
from ..logging_config import setup_logging
from ..report import save_report
from . import app
from ._common import console, err_console, resolve_config
from .show_config import show_config

EXIT_SAVE_FAILED = 2


def _resolve_target(path_arg: Optional[Path], path_option: Optional[Path]) -> Path:
    if path_arg is not None and path_option is not None and path_arg != path_option:
        raise InvalidPathError(path_arg, f"conflicts with --path {path_option}")
    target = path_arg or path_option or Path.cwd()
    if not target.is_dir():
        reason = "does not exist" if not target.exists() else "not a directory"
        raise InvalidPathError(target, reason)
    return target


def _write_outputs(
    result: AnalysisResult,
    rendered: str,
    root: Path,
    save: bool,
    output: Optional[Path],
) -> bool:
    """Persist the report where requested. Returns False if any write failed.

    ``--save`` always writes the text report into the root; ``--output``
    receives whatever format was selected.
    """
    ok = True
    if save:
        ok = save_report(root, result.text, result.config.report_filename) and ok
    if output is not None:
        ok = save_report(output.parent, rendered, output.name) and ok
    return ok


@app.command()
def main(
    path_arg: Optional[Path] = typer.Argument(
        None,
        metavar="[PATH]",
        help="Project root to analyze (default: current directory)",
        show_default=False,
    ),
    path_option: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Same as PATH",
    ),
    extensions: Optional[List[str]] = typer.Option(
        None,
        "-e",
        "--ext",
        help="Source-file suffix to include; repeat for several (default: .kt)",
    ),
    output_format: str = typer.Option(
        "text",
        "-f",
        "--format",
        help="Output format",
        click_type=click.Choice(sorted(FORMATTERS), case_sensitive=False),
    ),
    per_file: bool = typer.Option(
        False,
        "--per-file",
        help="Include per-file metrics in the output",
    ),
    save: bool = typer.Option(
        False,
        "--save/--no-save",
        help="Write the text report into the project root (code_quality_report.txt)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Write the report, in the selected format, to this file",
        file_okay=True,
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    print_config: bool = typer.Option(
        False,
        "--show-config",
        help="Print the merged configuration as JSON and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every analyzed and skipped file",
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
        help="Show version and exit",
    ),
):
    """
    Compute lexical quality metrics for a source tree.

    Counts lines, comment lines, control-flow keywords, peak brace nesting
    and duplicate lines, then rates each against total lines as low,
    moderate or high.

    [bold cyan]Examples:[/bold cyan]

      code-quality-analysis

      code-quality-analysis /path/to/project --ext .kt --ext .java

      code-quality-analysis --format json --per-file

      code-quality-analysis --save

      code-quality-analysis -c custom.toml --show-config
    """
    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]Code Quality Analysis[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        if print_config:
            show_config(config)
            raise typer.Exit(0)

        target = _resolve_target(path_arg, path_option)
        settings = resolve_config(
            config=config, extensions=extensions, verbose=verbose, quiet=quiet
        )
        result = analyze_path(target, settings)

        output_format = output_format.lower()
        formatter = get_formatter(output_format, include_files=per_file)
        if output_format == "rich":
            formatter.render(result)
            rendered = result.text
        else:
            rendered = formatter.format(result)
            typer.echo(rendered, nl=not rendered.endswith("\n"))

        if not _write_outputs(result, rendered, target, save, output):
            err_console.print("[red]Report could not be written[/red]")
            raise typer.Exit(EXIT_SAVE_FAILED)

    except typer.Exit:
        raise

    except CodeQualityError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)
