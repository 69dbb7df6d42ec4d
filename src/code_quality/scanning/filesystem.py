"""Filesystem-backed tree nodes."""

from __future__ import annotations

from pathlib import Path
from typing import Hashable, Sequence

from ..file_ops import safe_read_lines


class PathNode:
    """Expose a ``Path`` through the ``TreeNode`` interface."""

    def __init__(self, path: Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding
        self.name = self.path.name or str(self.path)

    def __repr__(self) -> str:
        return f"PathNode({str(self.path)!r})"

    @property
    def is_directory(self) -> bool:
        return self.path.is_dir()

    @property
    def is_symlink(self) -> bool:
        return self.path.is_symlink()

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def identity(self) -> Hashable:
        # (device, inode) survives symlink aliasing
        st = self.path.stat()
        return (st.st_dev, st.st_ino)

    def size_bytes(self) -> int:
        return self.path.stat().st_size

    def children(self) -> Sequence[PathNode]:
        """List directory entries, sorted by name for a stable walk order.

        Raises:
            OSError: If the directory cannot be listed
        """
        return [PathNode(child, self.encoding) for child in sorted(self.path.iterdir())]

    def read_lines(self) -> list[str]:
        """Read the file's lines.

        Raises:
            FileAccessError: If the file cannot be read
        """
        return safe_read_lines(self.path, encoding=self.encoding)
