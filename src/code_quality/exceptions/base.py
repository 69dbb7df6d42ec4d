"""Root of the Code Quality Analysis exception tree."""

from typing import Dict, Optional


class CodeQualityError(Exception):
    """Raised for anything the analyzer reports to its caller.

    ``details`` carries the fields a log line or the CLI should show next to
    the message (a path, a config key, a reason). They are appended to
    ``str(error)`` in insertion order.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        fields = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({fields})"
