"""Source tree nodes.

The walker only talks to ``TreeNode``. ``PathNode`` (see ``filesystem``)
backs it with a real directory; ``SourceFile`` and ``DirectoryNode`` here
back it with in-memory content for hosts that already hold file text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Hashable, Protocol, Sequence

from ..file_ops import split_lines


class TreeNode(Protocol):
    """A file or directory reachable from a scan root."""

    name: str

    @property
    def is_directory(self) -> bool: ...

    @property
    def is_symlink(self) -> bool: ...

    @property
    def extension(self) -> str: ...

    @property
    def identity(self) -> Hashable: ...

    def size_bytes(self) -> int: ...

    def children(self) -> Sequence[TreeNode]: ...

    def read_lines(self) -> list[str]: ...


@dataclass(frozen=True, eq=False)
class SourceFile:
    """In-memory file leaf."""

    name: str
    lines: tuple[str, ...] = ()

    @classmethod
    def from_text(cls, name: str, text: str) -> SourceFile:
        return cls(name=name, lines=tuple(split_lines(text)))

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def is_symlink(self) -> bool:
        return False

    @property
    def extension(self) -> str:
        return PurePosixPath(self.name).suffix

    @property
    def identity(self) -> Hashable:
        return id(self)

    def size_bytes(self) -> int:
        return sum(len(line.encode("utf-8")) + 1 for line in self.lines)

    def children(self) -> Sequence[TreeNode]:
        return ()

    def read_lines(self) -> list[str]:
        return list(self.lines)


@dataclass(frozen=True, eq=False)
class DirectoryNode:
    """In-memory directory; owns an ordered set of child nodes."""

    name: str
    nodes: tuple[TreeNode, ...] = field(default_factory=tuple)

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def is_symlink(self) -> bool:
        return False

    @property
    def extension(self) -> str:
        return ""

    @property
    def identity(self) -> Hashable:
        return id(self)

    def size_bytes(self) -> int:
        return 0

    def children(self) -> Sequence[TreeNode]:
        return self.nodes

    def read_lines(self) -> list[str]:
        raise IsADirectoryError(self.name)
