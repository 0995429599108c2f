"""
Tests for report rendering.
"""

import logging

from hostprep.core.engine.report import format_outcome, log_report, render_report
from hostprep.core.models.action import InstallOutcome
from hostprep.core.models.report import RunReport


def _report(*outcomes: InstallOutcome) -> RunReport:
    report = RunReport()
    for outcome in outcomes:
        report.record(outcome)
    return report


class TestRenderReport:
    def test_empty_sections_print_none(self):
        assert render_report(RunReport()) == [
            "=== Installation Summary ===",
            "",
            "Already installed:",
            "None",
            "",
            "Newly installed:",
            "None",
            "",
            "Failed installations:",
            "None",
        ]

    def test_sections_in_fixed_order(self):
        lines = render_report(_report(
            InstallOutcome.failure("tree", "Unable to locate package tree"),
            InstallOutcome.newly("htop"),
            InstallOutcome.already("nano"),
        ))
        assert lines == [
            "=== Installation Summary ===",
            "",
            "Already installed:",
            "✓ nano",
            "",
            "Newly installed:",
            "✓ htop",
            "",
            "Failed installations:",
            "✗ tree: Unable to locate package tree",
        ]

    def test_dry_run_tag(self):
        assert format_outcome(InstallOutcome.newly("htop", dry_run=True)) == "✓ htop (dry-run)"

    def test_one_line_per_entry(self):
        lines = render_report(_report(InstallOutcome.newly("a"), InstallOutcome.newly("b")))
        start = lines.index("Newly installed:")
        assert lines[start + 1:start + 3] == ["✓ a", "✓ b"]


class TestLogReport:
    def test_lines_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="hostprep.report"):
            log_report(_report(InstallOutcome.failure("tree", "E: x")))
        messages = [r.getMessage() for r in caplog.records if r.name == "hostprep.report"]
        assert "Failed installations:" in messages
        assert "✗ tree: E: x" in messages
        assert "" not in messages
