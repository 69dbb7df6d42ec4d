"""Tests for report assembly and persistence."""

import logging

from code_quality.analysis.aggregator import MetricTotals
from code_quality.classification import Level
from code_quality.report import build_report, save_report


class TestBuildReport:
    def test_line_order_and_values(self):
        totals = MetricTotals(
            total_lines=100,
            comment_lines=12,
            complexity=30,
            max_nesting_depth=4,
            duplicate_lines=2,
        )
        lines = build_report(totals).lines()
        assert lines == [
            "Total lines of code: 100",
            "Comment lines: 12",
            "Comment to code ratio: 0.12",
            "Comment level: Moderate amount of comments on code length (10-20% of code length)",
            "Total Cyclomatic Complexity: 30",
            "Cyclomatic complexity level: High cyclomatic complexity "
            "(more than 20% of the code length)",
            "Maximum Nesting Depth: 4",
            "Nesting depth level: Low nesting depth in loops "
            "(5-10% of the code length is the minimum nesting depth)",
            "Total Duplicate Lines: 2",
            "Duplicate lines level: Few duplicated lines in the code "
            "(5-10% of the code length is the minimum number of duplicates)",
        ]

    def test_empty_totals_are_all_low(self):
        report = build_report(MetricTotals())
        assert all(a.level is Level.LOW for a in report.assessments)
        assert "Comment to code ratio: 0.00" in report.lines()
        assert report.lines()[0] == "Total lines of code: 0"

    def test_ratio_rounds_half_up(self):
        report = build_report(MetricTotals(total_lines=8, comment_lines=1))
        assert "Comment to code ratio: 0.13" in report.lines()

    def test_ratio_rounds_shortest_decimal_form(self):
        # 29/200 is stored just below 0.145
        report = build_report(MetricTotals(total_lines=200, comment_lines=29))
        assert report.lines()[2] == "Comment to code ratio: 0.15"

    def test_ratio_below_half_rounds_down(self):
        report = build_report(MetricTotals(total_lines=3, comment_lines=1))
        assert report.lines()[2] == "Comment to code ratio: 0.33"

    def test_text_is_newline_terminated(self):
        text = build_report(MetricTotals(total_lines=1)).as_text()
        assert text.endswith("\n")
        assert len(text.splitlines()) == 10

    def test_assessment_lookup(self):
        report = build_report(MetricTotals(total_lines=10, duplicate_lines=5))
        duplicates = report.assessment("duplicates")
        assert duplicates.value == 5
        assert duplicates.ratio == 0.5
        assert duplicates.level is Level.HIGH
        assert duplicates.description.startswith("A large number of duplicated lines")


class TestSaveReport:
    def test_writes_file(self, tmp_path):
        assert save_report(tmp_path, "Total lines of code: 0\n") is True
        assert (tmp_path / "code_quality_report.txt").read_text() == "Total lines of code: 0\n"

    def test_custom_filename(self, tmp_path):
        assert save_report(tmp_path, "x\n", filename="out.txt")
        assert (tmp_path / "out.txt").exists()

    def test_failure_is_logged_not_raised(self, tmp_path, caplog):
        missing_dir = tmp_path / "does" / "not" / "exist"
        with caplog.at_level(logging.ERROR, logger="code_quality"):
            assert save_report(missing_dir, "x\n") is False
        assert "Failed to save report" in caplog.text
