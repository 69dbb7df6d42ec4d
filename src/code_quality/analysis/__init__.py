"""Tree-wide aggregation and the analysis engine."""

from .aggregator import MetricTotals, aggregate
from .engine import AnalysisResult, analyze_path, analyze_tree, scan_file

__all__ = [
    "MetricTotals",
    "aggregate",
    "AnalysisResult",
    "analyze_tree",
    "analyze_path",
    "scan_file",
]
