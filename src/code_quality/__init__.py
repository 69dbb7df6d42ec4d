"""
Code Quality Analysis - lexical source metrics for a directory tree.

Counts lines, comment lines, control-flow keywords, peak brace nesting and
repeated lines, then classifies each against total lines as low, moderate
or high. No parsing: every metric is a line-by-line heuristic.
"""

__version__ = "0.1.0"

from .analysis import AnalysisResult, MetricTotals, analyze_tree
from .api import analyze
from .classification import Level
from .config import AnalysisConfig, load_config
from .metrics import FileMetrics
from .report import Report, build_report, save_report
from .scanning import DirectoryNode, PathNode, SourceFile

__all__ = [
    "analyze",  # Main entry point
    "analyze_tree",  # In-memory or custom trees
    "AnalysisResult",
    "AnalysisConfig",
    "load_config",
    "MetricTotals",
    "FileMetrics",
    "Level",
    "Report",
    "build_report",
    "save_report",
    "SourceFile",
    "DirectoryNode",
    "PathNode",
]
