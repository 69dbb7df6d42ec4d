"""Analysis-related exceptions: reading sources and writing reports."""

from pathlib import Path

from .base import CodeQualityError


class AnalysisError(CodeQualityError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ReportWriteError(AnalysisError):
    """Raised when the rendered report cannot be written to disk."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot write report: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
