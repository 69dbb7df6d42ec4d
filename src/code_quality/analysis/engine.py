"""Analysis engine: walk the tree, scan each file, fold the results.

Execution is single-threaded. Each file is read once, every scanner makes
its own pass over the lines, and the file's content is dropped before the
next file is visited. A file that cannot be read is logged and counted as
failed; it never aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from ..config import AnalysisConfig
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..metrics import FileMetrics, scan_lines
from ..report import Report, build_report
from ..scanning import PathNode, TreeNode, TreeWalker, WalkedFile, WalkStats
from .aggregator import MetricTotals, aggregate

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced by one run."""

    root: str
    config: AnalysisConfig
    totals: MetricTotals
    files: tuple[FileMetrics, ...]
    failed_files: tuple[str, ...]
    report: Report
    walk_stats: WalkStats

    @property
    def text(self) -> str:
        return self.report.as_text()


def scan_file(walked: WalkedFile, config: AnalysisConfig) -> Optional[FileMetrics]:
    """Scan one file; return None if it could not be read."""
    try:
        lines = walked.node.read_lines()
    except FileAccessError as e:
        logger.warning(f"Access error for {walked.path}: {e.reason}")
        return None
    except OSError as e:
        logger.warning(f"Access error for {walked.path}: {e}")
        return None

    metrics = scan_lines(walked.path, lines, config.scanner)
    logger.debug(f"Analyzed: {walked.path} ({metrics.total_lines} lines)")
    return metrics


def analyze_tree(root: TreeNode, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Compute totals and the report for any tree of nodes."""
    config = config or AnalysisConfig()
    walker = TreeWalker.from_config(config)

    outcomes: list[Optional[FileMetrics]] = []
    failed: list[str] = []
    for walked in walker.walk(root):
        outcome = scan_file(walked, config)
        if outcome is None:
            failed.append(walked.path)
        outcomes.append(outcome)

    totals = aggregate(outcomes)
    logger.info(
        f"Scan complete: {totals.files_scanned} analyzed, {totals.files_failed} errors, "
        f"{totals.total_lines} lines"
    )

    return AnalysisResult(
        root=root.name,
        config=config,
        totals=totals,
        files=tuple(m for m in outcomes if m is not None),
        failed_files=tuple(failed),
        report=build_report(totals, config.thresholds),
        walk_stats=walker.stats,
    )


def analyze_path(
    path: Union[str, Path], config: Optional[AnalysisConfig] = None
) -> AnalysisResult:
    """Compute totals and the report for a directory on disk."""
    config = config or AnalysisConfig()
    root = PathNode(Path(path), encoding=config.encoding)
    return replace(analyze_tree(root, config), root=str(path))
