"""Console rendering of a gate run for CI logs."""

from __future__ import annotations

import json
from enum import Enum

from eventdiff.policy.severity import Severity
from eventdiff.schema_diff.change_models import ChangeSummary, RunReport


class ConsoleLabel(str, Enum):
    """Summary-line label, which distinguishes warnings from clean passes."""

    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


def console_label(summary: ChangeSummary) -> ConsoleLabel:
    """Return FAIL on any block, WARN on any warning, otherwise PASS."""
    if summary.blocks > 0:
        return ConsoleLabel.FAIL
    if summary.warns > 0:
        return ConsoleLabel.WARN
    return ConsoleLabel.PASS


def render_console_report(report: RunReport) -> list[str]:
    """Render the console lines, ending with the JSON run report.

    Line order is relied on by CI log scrapers and must stay stable.
    """
    summary = report.summary
    owners = report.owner_teams()
    lines = [
        f"EventDiff: {console_label(summary).value} | "
        f"blocks={summary.blocks} warns={summary.warns} passes={summary.passes}",
        f"Owner: {', '.join(owners)}" if owners else "Owner: (none configured)",
        _action_hint(report, owners),
    ]
    changes = report.changes()
    lines.extend(
        f"BLOCK: {change.kind.value} - {change.message}"
        for change in changes
        if change.severity is Severity.BLOCK
    )
    lines.extend(
        f"WARN: {change.kind.value} - {change.message}"
        for change in changes
        if change.severity is Severity.WARN
    )
    lines.append(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return lines


def _action_hint(report: RunReport, owners: tuple[str, ...]) -> str:
    if not report.reports:
        return "ACTION: No schema changes detected"
    if owners:
        return "ACTION: Request review from owner team(s) above"
    return "ACTION: Add owners.json mapping for this event"
