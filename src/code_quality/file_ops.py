"""
Safe file operations for Code Quality Analysis.

Every read and write opens its file in a ``with`` block, so no handle
outlives the call, and OS-level failures surface as the package's own
exceptions.
"""

from pathlib import Path, PurePosixPath
from typing import Iterable

from .exceptions import FileAccessError, ReportWriteError


def split_lines(text: str) -> list[str]:
    """Split text on LF, CR and CRLF only; a trailing terminator adds no line."""
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def safe_read_lines(
    filepath: Path,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> list[str]:
    """
    Read a text file and split it into lines.

    Only LF, CR and CRLF end a line; form feeds and Unicode line
    separators stay inside it. A trailing newline does not produce an
    extra empty line.

    Args:
        filepath: File to read
        encoding: Text encoding
        errors: How to handle encoding errors

    Returns:
        File contents as a list of lines

    Raises:
        FileAccessError: If file cannot be read
    """
    try:
        with open(filepath, encoding=encoding, errors=errors) as f:
            return split_lines(f.read())
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except LookupError as e:
        raise FileAccessError(filepath, f"Unknown encoding: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write text to a file, replacing any previous content.

    Args:
        filepath: File to write
        content: Content to write
        encoding: Text encoding

    Raises:
        ReportWriteError: If file cannot be written
    """
    try:
        with open(filepath, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise ReportWriteError(filepath, f"Write failed: {e}")


def should_skip_file(relative_path: str, exclude_patterns: Iterable[str]) -> bool:
    """
    Check if a file should be skipped based on exclusion patterns.

    Patterns use ``PurePath.match`` semantics, so relative patterns match
    from the right: ``"*.gen.kt"`` matches at any depth.

    Args:
        relative_path: POSIX path of the file relative to the scan root
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if file should be skipped
    """
    path = PurePosixPath(relative_path)
    for pattern in exclude_patterns:
        if path.match(pattern):
            return True
    return False


def should_skip_directory(relative_path: str, exclude_patterns: Iterable[str]) -> bool:
    """
    Check if a whole directory can be pruned.

    Only directory patterns of the form ``"<dir>/*"`` prune; the directory
    is skipped when its path matches ``<dir>``.

    Args:
        relative_path: POSIX path of the directory relative to the scan root
        exclude_patterns: List of glob patterns to exclude

    Returns:
        True if the directory should not be descended into
    """
    path = PurePosixPath(relative_path)
    for pattern in exclude_patterns:
        if pattern.endswith("/*") and path.match(pattern[:-2]):
            return True
    return False
