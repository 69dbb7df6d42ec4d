"""Base formatter interface for report rendering."""

from abc import ABC, abstractmethod

from ..analysis import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def __init__(self, include_files: bool = False):
        self.include_files = include_files

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Render the result to the terminal."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the result."""
