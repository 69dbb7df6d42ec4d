"""Public API for Code Quality Analysis.

Example:
    >>> from code_quality import analyze
    >>>
    >>> result = analyze("/path/to/project")
    >>> print(result.text)
    >>>
    >>> # Scan Java sources too
    >>> result = analyze("/path/to/project", extensions=[".kt", ".java"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .analysis import AnalysisResult, analyze_path
from .config import load_config
from .exceptions import InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze a directory tree and return totals, per-file metrics and the report.

    Logging is left to the caller; use ``setup_logging`` to see progress.

    Args:
        path: Project root to scan (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. extensions=[".kt"])

    Returns:
        AnalysisResult

    Raises:
        InvalidPathError: If path is not a directory
        ConfigurationError: If configuration is invalid
    """
    root = Path(path)
    if not root.is_dir():
        raise InvalidPathError(root, "not a directory")

    config = load_config(config_file=config_file, **overrides)
    logger.info(f"Starting analysis of {root} for {', '.join(config.extensions)}")

    return analyze_path(root, config)
