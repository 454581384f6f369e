"""Field-level schema comparison service."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eventdiff.policy.policy_models import PolicyConfiguration
from eventdiff.policy.policy_resolver import severity_for
from eventdiff.policy.rule_keys import RuleKey
from eventdiff.schema_management.enum_comparison import enum_diff, format_enum_value
from eventdiff.schema_management.schema_models import FieldDescriptor, SchemaSnapshot
from eventdiff.schema_management.schema_projection import flatten_schema

from .change_models import ChangeKind, ChangeRecord, SchemaDiff, summarize_changes


def diff_schema_documents(
    old_document: Any,
    new_document: Any,
    owner_teams: Sequence[str],
    policy: PolicyConfiguration,
) -> SchemaDiff:
    """Flatten two parsed schema documents and diff them."""
    return diff_schemas(
        flatten_schema(old_document), flatten_schema(new_document), owner_teams, policy
    )


def diff_schemas(
    old: SchemaSnapshot,
    new: SchemaSnapshot,
    owner_teams: Sequence[str],
    policy: PolicyConfiguration,
) -> SchemaDiff:
    """Classify every difference between two snapshots in ascending path order."""
    classifier = _ChangeClassifier(owner_teams=tuple(owner_teams), policy=policy)
    changes: list[ChangeRecord] = []
    for path in sorted(old.keys() | new.keys()):
        before = old.get(path)
        after = new.get(path)
        if after is None and before is not None:
            changes.append(classifier.field_removed(before))
        elif before is None and after is not None:
            changes.append(classifier.field_added(after))
        elif before is not None and after is not None:
            changes.extend(classifier.field_changed(before, after))
    return SchemaDiff(summary=summarize_changes(changes), changes=tuple(changes))


class _ChangeClassifier:
    """Builds change records with severities resolved for one set of owners."""

    def __init__(self, owner_teams: tuple[str, ...], policy: PolicyConfiguration) -> None:
        self._owner_teams = owner_teams
        self._policy = policy

    def field_removed(self, before: FieldDescriptor) -> ChangeRecord:
        if before.required:
            return self._record(
                ChangeKind.FIELD_REMOVED,
                RuleKey.FIELD_REMOVED_REQUIRED,
                before.path,
                f"Removed required field '{before.path}'.",
            )
        return self._record(
            ChangeKind.FIELD_REMOVED,
            RuleKey.FIELD_REMOVED_OPTIONAL,
            before.path,
            f"Removed optional field '{before.path}'.",
        )

    def field_added(self, after: FieldDescriptor) -> ChangeRecord:
        if after.required:
            return self._record(
                ChangeKind.FIELD_ADDED,
                RuleKey.FIELD_ADDED_REQUIRED,
                after.path,
                f"Added required field '{after.path}'.",
            )
        return self._record(
            ChangeKind.FIELD_ADDED,
            RuleKey.FIELD_ADDED_OPTIONAL,
            after.path,
            f"Added optional field '{after.path}'.",
        )

    def field_changed(self, before: FieldDescriptor, after: FieldDescriptor) -> list[ChangeRecord]:
        path = before.path
        changes: list[ChangeRecord] = []

        if not before.required and after.required:
            changes.append(
                self._record(
                    ChangeKind.REQUIRED_BECOMES_REQUIRED,
                    RuleKey.REQUIRED_BECOMES_REQUIRED,
                    path,
                    f"Optional → required: '{path}'.",
                )
            )
        elif before.required and not after.required:
            changes.append(
                self._record(
                    ChangeKind.REQUIRED_BECOMES_OPTIONAL,
                    RuleKey.REQUIRED_BECOMES_OPTIONAL,
                    path,
                    f"Required → optional: '{path}'.",
                )
            )

        if before.type != after.type or before.nullable != after.nullable:
            changes.append(
                self._record(
                    ChangeKind.TYPE_CHANGED,
                    RuleKey.TYPE_CHANGED,
                    path,
                    f"Type changed '{path}': {before.type_label} → {after.type_label}",
                )
            )

        values = enum_diff(before.enum, after.enum)
        if values.removed:
            changes.append(
                self._record(
                    ChangeKind.ENUM_VALUE_REMOVED,
                    RuleKey.ENUM_VALUE_REMOVED,
                    path,
                    f"Enum removed from '{path}': {_join_values(values.removed)}",
                )
            )
        if values.added:
            changes.append(
                self._record(
                    ChangeKind.ENUM_VALUE_ADDED,
                    RuleKey.ENUM_VALUE_ADDED,
                    path,
                    f"Enum added to '{path}': {_join_values(values.added)}",
                )
            )
        return changes

    def _record(self, kind: ChangeKind, rule_key: RuleKey, path: str, message: str) -> ChangeRecord:
        return ChangeRecord(
            kind=kind,
            path=path,
            severity=severity_for(rule_key, self._owner_teams, self._policy),
            message=message,
        )


def _join_values(values: Sequence[Any]) -> str:
    return ", ".join(format_enum_value(value) for value in values)
