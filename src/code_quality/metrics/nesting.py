"""Brace-balance nesting depth."""

from collections.abc import Iterable, Iterator


def running_depths(
    lines: Iterable[str], open_char: str = "{", close_char: str = "}"
) -> Iterator[int]:
    """Yield the brace balance after each line.

    Unbalanced input is tolerated; the balance may go negative.
    """
    depth = 0
    for line in lines:
        depth += line.count(open_char) - line.count(close_char)
        yield depth


def max_nesting_depth(lines: Iterable[str], open_char: str = "{", close_char: str = "}") -> int:
    """Peak brace balance reached in the file, never below zero."""
    peak = 0
    for depth in running_depths(lines, open_char, close_char):
        peak = max(peak, depth)
    return peak
