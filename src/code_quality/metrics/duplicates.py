"""Repeated-line detection within a single file."""

from collections import Counter
from collections.abc import Iterable


def count_duplicate_lines(lines: Iterable[str]) -> int:
    """Count distinct non-blank lines that occur more than once.

    Lines are compared after stripping surrounding whitespace. A line text
    is counted once, when it is seen for the second time; further repeats
    add nothing.
    """
    occurrences: Counter = Counter()
    duplicates = 0
    for line in lines:
        text = line.strip()
        if not text:
            continue
        occurrences[text] += 1
        if occurrences[text] == 2:
            duplicates += 1
    return duplicates
