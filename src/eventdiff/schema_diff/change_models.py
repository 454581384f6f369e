"""Schema diff entities and report structures."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from eventdiff.policy.severity import Severity


class ChangeKind(str, Enum):
    """Kinds of difference reported for one field or file."""

    FIELD_REMOVED = "FIELD_REMOVED"
    FIELD_ADDED = "FIELD_ADDED"
    REQUIRED_BECOMES_REQUIRED = "REQUIRED_BECOMES_REQUIRED"
    REQUIRED_BECOMES_OPTIONAL = "REQUIRED_BECOMES_OPTIONAL"
    TYPE_CHANGED = "TYPE_CHANGED"
    ENUM_VALUE_REMOVED = "ENUM_VALUE_REMOVED"
    ENUM_VALUE_ADDED = "ENUM_VALUE_ADDED"
    FILE_ADDED = "FILE_ADDED"
    FILE_REMOVED = "FILE_REMOVED"
    INVALID_JSON = "INVALID_JSON"


class Decision(str, Enum):
    """Gate outcome for a file or a whole run."""

    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class ChangeRecord:
    """One detected difference with its resolved severity."""

    kind: ChangeKind
    path: str
    severity: Severity
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "severity": self.severity.value,
            "kind": self.kind.value,
            "path": self.path,
            "message": self.message,
        }


@dataclass(frozen=True)
class ChangeSummary:
    """Severity counts and the derived decision."""

    blocks: int = 0
    warns: int = 0
    passes: int = 0

    @property
    def decision(self) -> Decision:
        """Return FAIL when any change blocks, otherwise PASS."""
        return Decision.FAIL if self.blocks > 0 else Decision.PASS

    def __add__(self, other: ChangeSummary) -> ChangeSummary:
        return ChangeSummary(
            blocks=self.blocks + other.blocks,
            warns=self.warns + other.warns,
            passes=self.passes + other.passes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "decision": self.decision.value,
            "blocks": self.blocks,
            "warns": self.warns,
            "passes": self.passes,
        }


def summarize_changes(changes: Iterable[ChangeRecord]) -> ChangeSummary:
    """Count changes by severity."""
    severities = [change.severity for change in changes]
    return ChangeSummary(
        blocks=severities.count(Severity.BLOCK),
        warns=severities.count(Severity.WARN),
        passes=severities.count(Severity.PASS),
    )


@dataclass(frozen=True)
class SchemaDiff:
    """Classified changes between two snapshots of one schema."""

    summary: ChangeSummary
    changes: tuple[ChangeRecord, ...]


@dataclass(frozen=True)
class FileReport:
    """Diff outcome for one changed schema file."""

    file: str
    summary: ChangeSummary
    changes: tuple[ChangeRecord, ...]
    owner_teams: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "summary": self.summary.to_dict(),
            "changes": [change.to_dict() for change in self.changes],
        }


@dataclass(frozen=True)
class RunReport:
    """Aggregated outcome of one gate run across every changed file."""

    base: str
    head: str
    dir: str
    summary: ChangeSummary
    reports: tuple[FileReport, ...]

    @property
    def decision(self) -> Decision:
        return self.summary.decision

    def changes(self) -> tuple[ChangeRecord, ...]:
        """Return every change in per-file, then per-change order."""
        return tuple(change for report in self.reports for change in report.changes)

    def owner_teams(self) -> tuple[str, ...]:
        """Return the owners of all changed events in first-seen order."""
        teams = (team for report in self.reports for team in report.owner_teams)
        return tuple(dict.fromkeys(teams))

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base,
            "head": self.head,
            "dir": self.dir,
            "summary": self.summary.to_dict(),
            "reports": [report.to_dict() for report in self.reports],
        }
