"""Severity levels ordered by strictness."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Compatibility risk assigned to one detected change."""

    PASS = "pass"
    WARN = "warn"
    BLOCK = "block"

    @property
    def rank(self) -> int:
        """Return the position of this severity in the pass < warn < block order."""
        return _RANKS[self]


_RANKS = {Severity.PASS: 0, Severity.WARN: 1, Severity.BLOCK: 2}


def strictest(first: Severity, *others: Severity) -> Severity:
    """Return the strictest of the given severities."""
    return max((first, *others), key=lambda severity: severity.rank)
