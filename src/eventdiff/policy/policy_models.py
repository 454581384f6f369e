"""Policy and ownership configuration entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .severity import Severity


@dataclass(frozen=True)
class PolicyConfiguration:
    """Default rule severities plus per-owner overrides, keyed by rule key."""

    default: Mapping[str, Severity] = field(default_factory=dict)
    overrides_by_owner: Mapping[str, Mapping[str, Severity]] = field(default_factory=dict)


@dataclass(frozen=True)
class OwnershipMap:
    """Owning teams per event name."""

    owners_by_event: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def owners_for(self, event_name: str) -> tuple[str, ...]:
        """Return the owning teams of an event, or an empty tuple when unmapped."""
        return self.owners_by_event.get(event_name, ())
