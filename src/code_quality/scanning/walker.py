"""Recursive source-file discovery."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Hashable, NamedTuple, Optional

from ..config import AnalysisConfig
from ..file_ops import should_skip_directory, should_skip_file
from ..logging_config import get_logger
from .tree import TreeNode

logger = get_logger(__name__)


class WalkedFile(NamedTuple):
    """An eligible source file and its POSIX path relative to the root."""

    path: str
    node: TreeNode


@dataclass
class WalkStats:
    """Counters collected during one walk."""

    files_found: int = 0
    files_skipped: int = 0
    directories_failed: int = 0
    truncated: bool = False


class TreeWalker:
    """Yield eligible source files under a root node.

    Eligibility is decided by suffix alone. Ineligible files are ignored
    silently; directories that cannot be listed are logged and skipped.
    """

    def __init__(
        self,
        extensions: Iterable[str] = (".kt",),
        exclude_patterns: Iterable[str] = (),
        allow_hidden_files: bool = True,
        follow_symlinks: bool = False,
        max_file_size_bytes: Optional[int] = None,
        max_files: Optional[int] = None,
    ):
        self.extensions = frozenset(extensions)
        self.exclude_patterns = list(exclude_patterns)
        self.allow_hidden_files = allow_hidden_files
        self.follow_symlinks = follow_symlinks
        self.max_file_size_bytes = max_file_size_bytes
        self.max_files = max_files
        self.stats = WalkStats()

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> TreeWalker:
        return cls(
            extensions=config.extensions,
            exclude_patterns=config.exclude_patterns,
            allow_hidden_files=config.allow_hidden_files,
            follow_symlinks=config.follow_symlinks,
            max_file_size_bytes=config.max_file_size_bytes,
            max_files=config.max_files,
        )

    def is_eligible(self, node: TreeNode) -> bool:
        return not node.is_directory and node.extension in self.extensions

    def walk(self, root: TreeNode) -> Iterator[WalkedFile]:
        """Walk ``root`` depth-first.

        The root itself is never filtered by name, so scanning ``"."`` or a
        hidden project directory works. A file root is yielded on its own
        when eligible.
        """
        self.stats = WalkStats()
        visited: set[Hashable] = set()

        if not root.is_directory:
            if self.is_eligible(root):
                self.stats.files_found += 1
                yield WalkedFile(root.name, root)
            return

        yield from self._walk_directory(root, "", visited)

        logger.info(
            f"Walk complete: {self.stats.files_found} source files, "
            f"{self.stats.files_skipped} skipped, "
            f"{self.stats.directories_failed} unreadable directories"
        )

    def _walk_directory(
        self, directory: TreeNode, prefix: str, visited: set[Hashable]
    ) -> Iterator[WalkedFile]:
        if self.follow_symlinks:
            # Symlink loops would otherwise recurse forever
            try:
                key = directory.identity
            except OSError as e:
                self._directory_failed(prefix, e)
                return
            if key in visited:
                logger.debug(f"Skipped (already visited): {prefix or '.'}")
                return
            visited.add(key)

        try:
            children = list(directory.children())
        except OSError as e:
            self._directory_failed(prefix, e)
            return

        for child in children:
            if self.stats.truncated:
                return

            rel = f"{prefix}/{child.name}" if prefix else child.name

            if not self.allow_hidden_files and child.name.startswith("."):
                continue
            try:
                if child.is_symlink and not self.follow_symlinks:
                    logger.debug(f"Skipped (symlink): {rel}")
                    continue
                is_directory = child.is_directory
            except OSError as e:
                logger.warning(f"Cannot inspect {rel}: {e}")
                continue

            if is_directory:
                if should_skip_directory(rel, self.exclude_patterns):
                    logger.debug(f"Skipped (pattern): {rel}/")
                    continue
                yield from self._walk_directory(child, rel, visited)
                continue

            if child.extension not in self.extensions:
                continue

            if should_skip_file(rel, self.exclude_patterns):
                self.stats.files_skipped += 1
                logger.debug(f"Skipped (pattern): {rel}")
                continue

            if self.max_file_size_bytes is not None:
                try:
                    size = child.size_bytes()
                except OSError as e:
                    self.stats.files_skipped += 1
                    logger.warning(f"Cannot stat {rel}: {e}")
                    continue
                if size > self.max_file_size_bytes:
                    self.stats.files_skipped += 1
                    logger.debug(f"Skipped (size): {rel} ({size} bytes)")
                    continue

            if self.max_files is not None and self.stats.files_found >= self.max_files:
                self.stats.truncated = True
                logger.warning(f"Reached max files limit ({self.max_files})")
                return

            self.stats.files_found += 1
            yield WalkedFile(rel, child)

    def _directory_failed(self, prefix: str, error: OSError) -> None:
        self.stats.directories_failed += 1
        logger.warning(f"Cannot list directory {prefix or '.'}: {error}")
