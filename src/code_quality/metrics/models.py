"""Data models for the metrics layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetrics:
    """Raw observations for a single source file"""

    path: str
    total_lines: int = 0
    comment_lines: int = 0
    complexity: int = 0
    max_nesting_depth: int = 0
    duplicate_lines: int = 0
