"""Shared test fixtures for Code Quality Analysis tests."""

import os

import pytest

from code_quality.config import AnalysisConfig
from code_quality.scanning import DirectoryNode, SourceFile


SAMPLE_KOTLIN = """\
package demo

/*
 * Greeter utilities.
 */
class Greeter {
    // Say hello
    fun greet(name: String): String {
        if (name.isEmpty()) {
            throw IllegalArgumentException("empty")
        }
        return "Hello"
    }
}
"""


@pytest.fixture
def sample_kotlin():
    """A small Kotlin file with comments, braces and keywords."""
    return SAMPLE_KOTLIN


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with no global/project config and no CODE_QUALITY_* variables."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("CODE_QUALITY_"):
            monkeypatch.delenv(key)
    return work


@pytest.fixture
def kotlin_project(tmp_path, sample_kotlin):
    """A directory tree with Kotlin sources, a non-source file and a nested package."""
    root = tmp_path / "project"
    pkg = root / "src" / "demo"
    pkg.mkdir(parents=True)
    (pkg / "Greeter.kt").write_text(sample_kotlin)
    (pkg / "Notes.md").write_text("# not source\nif while for\n")
    (root / "Main.kt").write_text("fun main() {\n    println(\"hi\")\n}\n")
    return root


@pytest.fixture
def memory_tree():
    """An in-memory tree mirroring a tiny project."""
    return DirectoryNode(
        "root",
        (
            SourceFile("A.kt", ("// header", "fun a() {", "    if (x) { }", "}")),
            DirectoryNode(
                "pkg",
                (
                    SourceFile("B.kt", ("val x = 1", "val x = 1", "val x = 1")),
                    SourceFile("README.txt", ("if if if",)),
                ),
            ),
        ),
    )


@pytest.fixture
def default_config():
    return AnalysisConfig()
