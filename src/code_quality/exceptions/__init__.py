"""Exception hierarchy for Code Quality Analysis."""

from .analysis import AnalysisError, FileAccessError, ReportWriteError
from .base import CodeQualityError
from .config import ConfigurationError, InvalidConfigError, InvalidPathError

__all__ = [
    "CodeQualityError",
    "AnalysisError",
    "FileAccessError",
    "ReportWriteError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
