"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from code_quality.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestAnalyzeCommand:
    def test_text_report(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(app, ["-C", str(kotlin_project)])
        assert result.exit_code == 0
        assert "Total lines of code: 17" in result.stdout
        assert "Comment to code ratio: 0.24" in result.stdout
        assert not (kotlin_project / "code_quality_report.txt").exists()

    def test_save_writes_report_into_root(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(app, ["-C", str(kotlin_project), "--save"])
        assert result.exit_code == 0
        saved = (kotlin_project / "code_quality_report.txt").read_text()
        assert saved.splitlines()[0] == "Total lines of code: 17"
        assert saved.count("\n") == 10

    def test_output_file(self, runner, isolated_env, kotlin_project, tmp_path):
        target = tmp_path / "report.json"
        result = runner.invoke(
            app, ["-C", str(kotlin_project), "--format", "json", "-o", str(target)]
        )
        assert result.exit_code == 0
        assert json.loads(target.read_text())["totals"]["total_lines"] == 17

    def test_failed_save_exit_code(self, runner, isolated_env, kotlin_project, tmp_path):
        target = tmp_path / "missing-dir" / "report.txt"
        result = runner.invoke(app, ["-C", str(kotlin_project), "-o", str(target)])
        assert result.exit_code == 2
        assert "Total lines of code: 17" in result.stdout

    def test_extensions_option(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(
            app, ["-C", str(kotlin_project), "--ext", ".md", "--format", "json", "--per-file"]
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [f["path"] for f in data["files"]] == ["src/demo/Notes.md"]

    def test_empty_directory(self, runner, isolated_env, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        result = runner.invoke(app, ["-C", str(empty)])
        assert result.exit_code == 0
        assert "Total lines of code: 0" in result.stdout
        assert "Few comments to the code length" in result.stdout

    def test_invalid_config_exits_1(self, runner, isolated_env, kotlin_project, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[thresholds]\nlow_ratio = 0.9\n")
        result = runner.invoke(app, ["-C", str(kotlin_project), "-c", str(bad)])
        assert result.exit_code == 1

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "version" in result.stdout


class TestPathArgument:
    def test_positional_path(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(app, [str(kotlin_project)])
        assert result.exit_code == 0
        assert "Total lines of code: 17" in result.stdout

    def test_defaults_to_current_directory(self, runner, isolated_env):
        (isolated_env / "Only.kt").write_text("val a = 1\n")
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Total lines of code: 1" in result.stdout

    def test_file_path_exits_1(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(app, ["-C", str(kotlin_project / "Main.kt")])
        assert result.exit_code == 1

    def test_missing_positional_path_exits_1(self, runner, isolated_env, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "nowhere")])
        assert result.exit_code == 1


class TestSaveFormat:
    def test_save_is_always_text(self, runner, isolated_env, kotlin_project):
        result = runner.invoke(app, [str(kotlin_project), "--format", "json", "--save"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["totals"]["total_lines"] == 17
        saved = (kotlin_project / "code_quality_report.txt").read_text()
        assert saved.startswith("Total lines of code: 17\n")


class TestShowConfig:
    def test_prints_merged_config(self, runner, isolated_env, tmp_path):
        custom = tmp_path / "custom.toml"
        custom.write_text('extensions = ["kt", "kts"]\n')
        result = runner.invoke(app, ["-c", str(custom), "--show-config"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["extensions"] == [".kt", ".kts"]
        assert data["exclude_patterns"] == []
        assert data["allow_hidden_files"] is True

    def test_invalid_config_exits_1(self, runner, isolated_env, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[thresholds]\nhigh_ratio = -1\n")
        result = runner.invoke(app, ["-c", str(bad), "--show-config"])
        assert result.exit_code == 1
