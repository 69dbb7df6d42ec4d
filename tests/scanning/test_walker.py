"""Tests for the recursive source-file walker."""

import os

import pytest

from code_quality.config import AnalysisConfig
from code_quality.scanning import DirectoryNode, PathNode, SourceFile, TreeWalker


def _paths(walker, root):
    return sorted(w.path for w in walker.walk(root))


class TestInMemoryWalk:
    """Walking DirectoryNode/SourceFile trees."""

    def test_finds_eligible_files_recursively(self, memory_tree):
        walker = TreeWalker(extensions=[".kt"])
        assert _paths(walker, memory_tree) == ["A.kt", "pkg/B.kt"]

    def test_multiple_extensions(self, memory_tree):
        walker = TreeWalker(extensions=[".kt", ".txt"])
        assert _paths(walker, memory_tree) == ["A.kt", "pkg/B.kt", "pkg/README.txt"]

    def test_empty_directory(self):
        walker = TreeWalker()
        assert _paths(walker, DirectoryNode("root")) == []
        assert walker.stats.files_found == 0

    def test_file_root(self):
        walker = TreeWalker()
        assert _paths(walker, SourceFile("Only.kt", ("x",))) == ["Only.kt"]
        assert _paths(walker, SourceFile("Only.java", ("x",))) == []

    def test_hidden_entries_included_by_default(self):
        root = DirectoryNode(
            "root",
            (
                DirectoryNode(".gradle", (SourceFile("Gen.kt"),)),
                SourceFile(".Hidden.kt"),
                SourceFile("Visible.kt"),
            ),
        )
        assert _paths(TreeWalker(), root) == [
            ".Hidden.kt",
            ".gradle/Gen.kt",
            "Visible.kt",
        ]
        assert _paths(TreeWalker(allow_hidden_files=False), root) == ["Visible.kt"]

    def test_hidden_root_is_still_walked(self):
        root = DirectoryNode(".", (SourceFile("A.kt"),))
        assert _paths(TreeWalker(allow_hidden_files=False), root) == ["A.kt"]

    def test_build_directories_walked_by_default(self):
        root = DirectoryNode(
            "root",
            (
                DirectoryNode("build", (SourceFile("Gen.kt"),)),
                DirectoryNode("out", (SourceFile("Out.kt"),)),
            ),
        )
        assert _paths(TreeWalker.from_config(AnalysisConfig()), root) == [
            "build/Gen.kt",
            "out/Out.kt",
        ]

    def test_exclude_patterns(self):
        root = DirectoryNode(
            "root",
            (
                DirectoryNode("build", (SourceFile("Gen.kt"),)),
                DirectoryNode(
                    "app",
                    (
                        DirectoryNode("build", (SourceFile("Nested.kt"),)),
                        SourceFile("Api.gen.kt"),
                        SourceFile("App.kt"),
                    ),
                ),
            ),
        )
        walker = TreeWalker(exclude_patterns=["build/*", "*.gen.kt"])
        assert _paths(walker, root) == ["app/App.kt"]
        assert walker.stats.files_skipped == 1

    def test_size_limit(self):
        root = DirectoryNode(
            "root", (SourceFile("Big.kt", ("x" * 100,)), SourceFile("Small.kt", ("x",)))
        )
        walker = TreeWalker(max_file_size_bytes=10)
        assert _paths(walker, root) == ["Small.kt"]
        assert walker.stats.files_skipped == 1

    def test_max_files_truncates(self):
        root = DirectoryNode(
            "root",
            (
                DirectoryNode("a", (SourceFile("1.kt"), SourceFile("2.kt"))),
                SourceFile("3.kt"),
            ),
        )
        walker = TreeWalker(max_files=2)
        assert _paths(walker, root) == ["a/1.kt", "a/2.kt"]
        assert walker.stats.truncated

    def test_unlistable_directory_is_skipped(self):
        class BrokenDirectory(DirectoryNode):
            def children(self):
                raise PermissionError("denied")

        root = DirectoryNode("root", (BrokenDirectory("locked"), SourceFile("A.kt")))
        walker = TreeWalker()
        assert _paths(walker, root) == ["A.kt"]
        assert walker.stats.directories_failed == 1

    def test_from_config(self):
        config = AnalysisConfig(extensions=("kt", ".kts"), exclude_patterns=[])
        walker = TreeWalker.from_config(config)
        assert walker.extensions == frozenset({".kt", ".kts"})
        assert walker.max_file_size_bytes == config.max_file_size_bytes


class TestFilesystemWalk:
    """Walking real directories through PathNode."""

    def test_finds_kotlin_files(self, kotlin_project):
        walker = TreeWalker()
        assert _paths(walker, PathNode(kotlin_project)) == ["Main.kt", "src/demo/Greeter.kt"]

    def test_nonexistent_root_yields_nothing(self, tmp_path):
        assert _paths(TreeWalker(), PathNode(tmp_path / "missing")) == []

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped_unless_followed(self, kotlin_project):
        link = kotlin_project / "linked"
        link.symlink_to(kotlin_project / "src", target_is_directory=True)

        assert _paths(TreeWalker(), PathNode(kotlin_project)) == [
            "Main.kt",
            "src/demo/Greeter.kt",
        ]
        followed = _paths(TreeWalker(follow_symlinks=True), PathNode(kotlin_project))
        # The linked directory aliases src/, so it is visited only once
        assert len(followed) == 2
        assert "Main.kt" in followed

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlink_loop_terminates(self, tmp_path):
        root = tmp_path / "loop"
        root.mkdir()
        (root / "A.kt").write_text("x\n")
        (root / "self").symlink_to(root, target_is_directory=True)

        assert _paths(TreeWalker(follow_symlinks=True), PathNode(root)) == ["A.kt"]
