"""Line-oriented metric scanners.

Each scanner is an independent pure function over a file's lines; none
relies on another's intermediate state. ``scan_lines`` runs all of them
over one file.
"""

from collections.abc import Sequence
from typing import Optional

from ..config import ScannerConfig
from .comments import classify_lines, count_comment_lines
from .complexity import count_complexity, line_complexity
from .duplicates import count_duplicate_lines
from .models import FileMetrics
from .nesting import max_nesting_depth, running_depths


def scan_lines(
    path: str, lines: Sequence[str], scanner: Optional[ScannerConfig] = None
) -> FileMetrics:
    """Compute all five metrics for one file's lines."""
    scanner = scanner or ScannerConfig()
    return FileMetrics(
        path=path,
        total_lines=len(lines),
        comment_lines=count_comment_lines(
            lines, scanner.line_comment, scanner.block_open, scanner.block_close
        ),
        complexity=count_complexity(lines, scanner.keywords),
        max_nesting_depth=max_nesting_depth(lines, scanner.nest_open, scanner.nest_close),
        duplicate_lines=count_duplicate_lines(lines),
    )


__all__ = [
    "FileMetrics",
    "scan_lines",
    "classify_lines",
    "count_comment_lines",
    "line_complexity",
    "count_complexity",
    "running_depths",
    "max_nesting_depth",
    "count_duplicate_lines",
]
