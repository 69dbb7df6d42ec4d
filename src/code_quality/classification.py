"""Bucket metric totals into qualitative levels."""

from enum import Enum
from typing import Optional

from .config import DEFAULT_THRESHOLDS, ThresholdConfig


class Level(Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


def ratio(value: int, total_lines: int) -> float:
    """``value / total_lines``, or 0.0 for an empty tree."""
    if total_lines <= 0:
        return 0.0
    return value / total_lines


def classify_ratio(value: float, thresholds: Optional[ThresholdConfig] = None) -> Level:
    """Map a ratio onto a level using half-open intervals.

    With the default breakpoints, 0.05 is already MODERATE and 0.20 is
    already HIGH.
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    if value < thresholds.low_ratio:
        return Level.LOW
    if value < thresholds.high_ratio:
        return Level.MODERATE
    return Level.HIGH


def classify(value: int, total_lines: int, thresholds: Optional[ThresholdConfig] = None) -> Level:
    return classify_ratio(ratio(value, total_lines), thresholds)
