"""Rich terminal formatter."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from ..analysis import AnalysisResult
from ..classification import Level
from ..report import METRICS_BY_KEY, format_ratio
from .base import BaseFormatter

_LEVEL_STYLE = {
    Level.LOW: "[green]low[/green]",
    Level.MODERATE: "[yellow]moderate[/yellow]",
    Level.HIGH: "[red]high[/red]",
}


class RichFormatter(BaseFormatter):
    """Summary table with colored levels, plus an optional per-file table."""

    def __init__(self, include_files: bool = False, console: Optional[Console] = None):
        super().__init__(include_files)
        self.console = console or Console()

    def render(self, result: AnalysisResult) -> None:
        self.console.print(self._summary_table(result))
        if self.include_files and result.files:
            self.console.print(self._files_table(result))
        if result.failed_files:
            self.console.print(
                f"[yellow]{len(result.failed_files)} file(s) could not be read[/yellow]"
            )

    def format(self, result: AnalysisResult) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result)
        return ""

    def _summary_table(self, result: AnalysisResult) -> Table:
        totals = result.totals
        table = Table(
            title=f"Code quality: {result.root} ({totals.files_scanned} files)",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_column("Ratio", justify="right")
        table.add_column("Level")

        table.add_row("Total lines of code", str(totals.total_lines), "", "")
        for a in result.report.assessments:
            table.add_row(
                METRICS_BY_KEY[a.key].value_label,
                str(a.value),
                format_ratio(a.ratio),
                _LEVEL_STYLE[a.level],
            )
        return table

    def _files_table(self, result: AnalysisResult) -> Table:
        table = Table(title="Per-file metrics", header_style="bold cyan")
        table.add_column("File")
        for name in ("Lines", "Comments", "Complexity", "Nesting", "Duplicates"):
            table.add_column(name, justify="right")
        for m in sorted(result.files, key=lambda m: m.path):
            table.add_row(
                m.path,
                str(m.total_lines),
                str(m.comment_lines),
                str(m.complexity),
                str(m.max_nesting_depth),
                str(m.duplicate_lines),
            )
        return table
