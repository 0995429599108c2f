"""
Report rendering — turn a RunReport into the end-of-run summary.

Rendering is pure: it returns lines. ``log_report`` mirrors the same
lines into the log so the dated log file keeps a timestamped copy.
"""

from __future__ import annotations

import logging

from hostprep.core.models.action import InstallOutcome
from hostprep.core.models.report import RunReport

logger = logging.getLogger("hostprep.report")

OK_MARK = "✓"
FAIL_MARK = "✗"

HEADER = "=== Installation Summary ==="
SECTIONS = (
    ("Already installed:", "already"),
    ("Newly installed:", "newly"),
    ("Failed installations:", "failed"),
)


def format_outcome(outcome: InstallOutcome) -> str:
    """One report line for one outcome."""
    if outcome.failed:
        return f"{FAIL_MARK} {outcome.name}: {outcome.reason}"
    suffix = " (dry-run)" if outcome.dry_run else ""
    return f"{OK_MARK} {outcome.name}{suffix}"


def render_report(report: RunReport) -> list[str]:
    """Render the summary: three sections in fixed order, "None" when empty."""
    lines = [HEADER]
    for title, attr in SECTIONS:
        lines.append("")
        lines.append(title)
        entries: list[InstallOutcome] = getattr(report, attr)
        if not entries:
            lines.append("None")
            continue
        lines.extend(format_outcome(o) for o in entries)
    return lines


def log_report(report: RunReport) -> None:
    """Write the rendered summary to the log, one record per line."""
    for line in render_report(report):
        if line:
            logger.info(line)
