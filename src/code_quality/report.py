"""Report assembly and persistence.

``build_report`` turns totals into an ordered list of label/value entries.
The text rendering of those entries is the canonical report:

    Total lines of code: 120
    Comment lines: 14
    Comment to code ratio: 0.12
    Comment level: Moderate amount of comments on code length (10-20% of code length)
    ...
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .classification import Level, classify_ratio, ratio
from .config import DEFAULT_REPORT_FILENAME, ThresholdConfig
from .exceptions import ReportWriteError
from .file_ops import safe_write_file
from .logging_config import get_logger

if TYPE_CHECKING:
    from .analysis.aggregator import MetricTotals

logger = get_logger(__name__)


@dataclass(frozen=True)
class MetricLabels:
    """How one ratio-based metric is labelled in the report."""

    key: str
    attribute: str
    value_label: str
    level_label: str
    descriptions: dict[Level, str]


METRICS: tuple[MetricLabels, ...] = (
    MetricLabels(
        key="comments",
        attribute="comment_lines",
        value_label="Comment lines",
        level_label="Comment level",
        descriptions={
            Level.LOW: "Few comments to the code length "
            "(5-10% of the code length is the minimum number of comments)",
            Level.MODERATE: "Moderate amount of comments on code length (10-20% of code length)",
            Level.HIGH: "A large number of comments on the code length "
            "(more than 20% of the code length)",
        },
    ),
    MetricLabels(
        key="complexity",
        attribute="complexity",
        value_label="Total Cyclomatic Complexity",
        level_label="Cyclomatic complexity level",
        descriptions={
            Level.LOW: "Low cyclomatic complexity "
            "(5-10% of the code length is the minimum complexity)",
            Level.MODERATE: "Moderate cyclomatic complexity (10-20% of the code length)",
            Level.HIGH: "High cyclomatic complexity (more than 20% of the code length)",
        },
    ),
    MetricLabels(
        key="nesting",
        attribute="max_nesting_depth",
        value_label="Maximum Nesting Depth",
        level_label="Nesting depth level",
        descriptions={
            Level.LOW: "Low nesting depth in loops "
            "(5-10% of the code length is the minimum nesting depth)",
            Level.MODERATE: "Moderate nesting depth in loops (10-20% of the code length)",
            Level.HIGH: "High nesting depth in loops (more than 20% of the code length)",
        },
    ),
    MetricLabels(
        key="duplicates",
        attribute="duplicate_lines",
        value_label="Total Duplicate Lines",
        level_label="Duplicate lines level",
        descriptions={
            Level.LOW: "Few duplicated lines in the code "
            "(5-10% of the code length is the minimum number of duplicates)",
            Level.MODERATE: "Moderate amount of duplicated lines in the code "
            "(10-20% of the code length)",
            Level.HIGH: "A large number of duplicated lines in the code "
            "(more than 20% of the code length)",
        },
    ),
)

METRICS_BY_KEY = {labels.key: labels for labels in METRICS}


@dataclass(frozen=True)
class ReportEntry:
    label: str
    value: str

    def __str__(self) -> str:
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class MetricAssessment:
    """A metric's raw value, its ratio to total lines, and its level."""

    key: str
    value: int
    ratio: float
    level: Level

    @property
    def description(self) -> str:
        return METRICS_BY_KEY[self.key].descriptions[self.level]


@dataclass(frozen=True)
class Report:
    totals: MetricTotals
    assessments: tuple[MetricAssessment, ...]
    entries: tuple[ReportEntry, ...]

    def assessment(self, key: str) -> MetricAssessment:
        for item in self.assessments:
            if item.key == key:
                return item
        raise KeyError(key)

    def lines(self) -> list[str]:
        return [str(entry) for entry in self.entries]

    def as_text(self) -> str:
        """Canonical text form; every line is newline-terminated."""
        return "".join(f"{line}\n" for line in self.lines())


def format_ratio(value: float) -> str:
    # Half-up on the shortest decimal form, so 29/200 renders as 0.15
    return str(Decimal(repr(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def build_report(totals: MetricTotals, thresholds: Optional[ThresholdConfig] = None) -> Report:
    """Classify each metric against total lines and lay out the report entries."""
    assessments = []
    entries = [ReportEntry("Total lines of code", str(totals.total_lines))]

    for labels in METRICS:
        value = getattr(totals, labels.attribute)
        metric_ratio = ratio(value, totals.total_lines)
        assessment = MetricAssessment(
            key=labels.key,
            value=value,
            ratio=metric_ratio,
            level=classify_ratio(metric_ratio, thresholds),
        )
        assessments.append(assessment)

        entries.append(ReportEntry(labels.value_label, str(value)))
        if labels.key == "comments":
            entries.append(ReportEntry("Comment to code ratio", format_ratio(metric_ratio)))
        entries.append(ReportEntry(labels.level_label, assessment.description))

    return Report(totals=totals, assessments=tuple(assessments), entries=tuple(entries))


def save_report(
    root: Path,
    text: str,
    filename: str = DEFAULT_REPORT_FILENAME,
    encoding: str = "utf-8",
) -> bool:
    """Write ``text`` to ``root / filename``.

    Returns:
        True if the report was written, False if the write failed. Failures
        are logged, never raised.
    """
    target = Path(root) / filename
    try:
        safe_write_file(target, text, encoding=encoding)
    except ReportWriteError as e:
        logger.error(f"Failed to save report to {e.filepath}: {e.reason}")
        return False
    logger.info(f"Report saved to {target}")
    return True
