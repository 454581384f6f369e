"""Enumerated value comparison between two schema revisions."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EnumDiff:
    """Values dropped from and introduced into an enum constraint."""

    removed: tuple[Any, ...]
    added: tuple[Any, ...]


def enum_diff(old_values: Iterable[Any] | None, new_values: Iterable[Any] | None) -> EnumDiff:
    """Return the sorted set difference between two enum value lists."""
    old_by_key = _index_values(old_values)
    new_by_key = _index_values(new_values)
    removed = [value for key, value in old_by_key.items() if key not in new_by_key]
    added = [value for key, value in new_by_key.items() if key not in old_by_key]
    return EnumDiff(
        removed=tuple(sorted(removed, key=natural_sort_key)),
        added=tuple(sorted(added, key=natural_sort_key)),
    )


def natural_sort_key(value: Any) -> tuple[int, Any]:
    """Order numbers numerically, then strings, then other literals by JSON text."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return 0, value
    if isinstance(value, str):
        return 1, value
    return 2, _canonical(value)


def format_enum_value(value: Any) -> str:
    """Render one enum literal for a change message."""
    return value if isinstance(value, str) else _canonical(value)


def _index_values(values: Iterable[Any] | None) -> dict[str, Any]:
    # JSON text keeps 1 and true apart and makes list/object literals hashable.
    indexed: dict[str, Any] = {}
    for value in values or ():
        indexed.setdefault(_canonical(value), value)
    return indexed


def _canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, ensure_ascii=False)
