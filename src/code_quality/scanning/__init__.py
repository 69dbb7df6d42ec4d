"""Source tree discovery: node types and the recursive walker."""

from .filesystem import PathNode
from .tree import DirectoryNode, SourceFile, TreeNode
from .walker import TreeWalker, WalkedFile, WalkStats

__all__ = [
    "TreeNode",
    "SourceFile",
    "DirectoryNode",
    "PathNode",
    "TreeWalker",
    "WalkedFile",
    "WalkStats",
]
