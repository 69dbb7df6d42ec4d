"""Comment-line detection.

A single forward pass with one piece of state: whether we are inside a
block comment. Only the start and end of each stripped line are checked,
so a trailing ``// note`` after code is not seen. The state starts closed
for every file.
"""

from collections.abc import Iterable, Iterator


def classify_lines(
    lines: Iterable[str],
    line_comment: str = "//",
    block_open: str = "/*",
    block_close: str = "*/",
) -> Iterator[bool]:
    """Yield True for each comment line, False for each code line."""
    in_block = False
    for line in lines:
        stripped = line.strip()
        if in_block:
            # The closing line still counts as comment
            if stripped.endswith(block_close):
                in_block = False
            yield True
        elif stripped.startswith(block_open):
            in_block = not stripped.endswith(block_close)
            yield True
        elif stripped.startswith(line_comment):
            yield True
        else:
            yield False


def count_comment_lines(
    lines: Iterable[str],
    line_comment: str = "//",
    block_open: str = "/*",
    block_close: str = "*/",
) -> int:
    """Number of lines classified as comments."""
    return sum(classify_lines(lines, line_comment, block_open, block_close))
