"""Plain-text formatter: the canonical report."""

from ..analysis import AnalysisResult
from .base import BaseFormatter


class TextFormatter(BaseFormatter):
    """Render the label/value report, optionally followed by per-file rows."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result), end="")

    def format(self, result: AnalysisResult) -> str:
        text = result.report.as_text()
        if not self.include_files:
            return text

        rows = ["", "Per-file metrics (lines, comments, complexity, nesting, duplicates):"]
        for m in sorted(result.files, key=lambda m: m.path):
            rows.append(
                f"{m.path}: {m.total_lines}, {m.comment_lines}, {m.complexity}, "
                f"{m.max_nesting_depth}, {m.duplicate_lines}"
            )
        for path in result.failed_files:
            rows.append(f"{path}: unreadable")
        return text + "".join(f"{row}\n" for row in rows)
