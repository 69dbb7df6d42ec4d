"""Keyword-count approximation of cyclomatic complexity.

Keywords are matched as plain substrings of the raw line, so ``if`` inside
``notify`` or a string literal counts too. Each keyword adds at most one
per line.
"""

from collections.abc import Iterable, Sequence

from ..config import DEFAULT_KEYWORDS


def line_complexity(line: str, keywords: Sequence[str] = DEFAULT_KEYWORDS) -> int:
    return sum(1 for keyword in keywords if keyword in line)


def count_complexity(lines: Iterable[str], keywords: Sequence[str] = DEFAULT_KEYWORDS) -> int:
    return sum(line_complexity(line, keywords) for line in lines)
