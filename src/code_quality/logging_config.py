"""
Logging for Code Quality Analysis.

All modules log under the ``code_quality`` logger. Records go to stderr
through rich, so the report on stdout stays clean when piped. File paths
appear verbatim in messages, which is why rich markup is disabled.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "code_quality"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def _verbosity(verbose: bool, quiet: bool) -> str:
    if quiet:
        return "quiet"
    return "verbose" if verbose else "normal"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    verbosity: Optional[str] = None,
) -> logging.Logger:
    """
    Attach handlers to the package logger.

    ``verbosity`` ("quiet", "normal" or "verbose", as in ``AnalysisConfig``)
    wins over the ``verbose``/``quiet`` flags. Calling this again replaces
    the handlers installed by the previous call.

    Returns:
        The ``code_quality`` logger
    """
    name = verbosity or _verbosity(verbose, quiet)
    if name not in _LEVELS:
        raise ValueError(f"Unknown verbosity: {name!r}")
    level = _LEVELS[name]
    detailed = name == "verbose"

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=detailed,
            markup=False,
            show_time=detailed,
            show_path=detailed,
        )
    )

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(file_handler)

    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a module, namespaced under ``code_quality``."""
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
