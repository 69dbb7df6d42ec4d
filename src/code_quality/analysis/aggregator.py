"""Fold per-file metrics into tree-wide totals.

Totals combine with sum for every counter except nesting depth, which
takes the max. Both are associative and commutative, so files may be
visited in any order and partial totals from separate shards can be
merged with ``MetricTotals.merge``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Optional

from ..metrics.models import FileMetrics


@dataclass(frozen=True)
class MetricTotals:
    """Tree-wide metric totals."""

    total_lines: int = 0
    comment_lines: int = 0
    complexity: int = 0
    max_nesting_depth: int = 0
    duplicate_lines: int = 0
    files_scanned: int = 0
    files_failed: int = 0

    def add(self, metrics: FileMetrics) -> MetricTotals:
        """Return new totals including one more file."""
        return MetricTotals(
            total_lines=self.total_lines + metrics.total_lines,
            comment_lines=self.comment_lines + metrics.comment_lines,
            complexity=self.complexity + metrics.complexity,
            max_nesting_depth=max(self.max_nesting_depth, metrics.max_nesting_depth),
            duplicate_lines=self.duplicate_lines + metrics.duplicate_lines,
            files_scanned=self.files_scanned + 1,
            files_failed=self.files_failed,
        )

    def add_failure(self) -> MetricTotals:
        """Return new totals recording a file that contributed nothing."""
        return MetricTotals(
            total_lines=self.total_lines,
            comment_lines=self.comment_lines,
            complexity=self.complexity,
            max_nesting_depth=self.max_nesting_depth,
            duplicate_lines=self.duplicate_lines,
            files_scanned=self.files_scanned,
            files_failed=self.files_failed + 1,
        )

    def merge(self, other: MetricTotals) -> MetricTotals:
        return MetricTotals(
            total_lines=self.total_lines + other.total_lines,
            comment_lines=self.comment_lines + other.comment_lines,
            complexity=self.complexity + other.complexity,
            max_nesting_depth=max(self.max_nesting_depth, other.max_nesting_depth),
            duplicate_lines=self.duplicate_lines + other.duplicate_lines,
            files_scanned=self.files_scanned + other.files_scanned,
            files_failed=self.files_failed + other.files_failed,
        )


def _fold(totals: MetricTotals, outcome: Optional[FileMetrics]) -> MetricTotals:
    return totals.add_failure() if outcome is None else totals.add(outcome)


def aggregate(outcomes: Iterable[Optional[FileMetrics]]) -> MetricTotals:
    """Reduce per-file outcomes into totals.

    ``None`` marks a file that could not be read; it is counted in
    ``files_failed`` and contributes zero to every metric.
    """
    return reduce(_fold, outcomes, MetricTotals())
