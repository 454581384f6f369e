"""Run-level schema gate use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import reduce
from pathlib import PurePosixPath
from typing import assert_never

from eventdiff.policy.policy_models import OwnershipMap, PolicyConfiguration
from eventdiff.policy.policy_resolver import severity_for
from eventdiff.policy.rule_keys import RuleKey
from eventdiff.revision_access.git_revision_source import RevisionAccessError
from eventdiff.schema_diff.change_models import (
    ChangeKind,
    ChangeRecord,
    ChangeSummary,
    FileReport,
    RunReport,
    summarize_changes,
)
from eventdiff.schema_diff.schema_differ import diff_schema_documents
from eventdiff.schema_management.schema_projection import SchemaError, load_schema_document

from .run_contracts import (
    FileAdded,
    FileOutcome,
    FileRemoved,
    InvalidSchema,
    RunRequest,
    SchemaPair,
    SchemaRevisionSource,
)

_LOGGER = logging.getLogger(__name__)


def execute_schema_gate_run(
    request: RunRequest,
    *,
    source: SchemaRevisionSource,
    policy: PolicyConfiguration,
    ownership: OwnershipMap,
) -> RunReport:
    """List the schema files changed between two revisions and gate them."""
    changed_files = source.list_changed_files(request.base, request.head, request.directory)
    _LOGGER.debug("%d changed schema file(s) under %s", len(changed_files), request.directory)
    return run_schema_diff(
        request.base,
        request.head,
        request.directory,
        changed_files,
        source=source,
        policy=policy,
        ownership=ownership,
    )


def run_schema_diff(
    base: str,
    head: str,
    directory: str,
    changed_files: Sequence[str],
    *,
    source: SchemaRevisionSource,
    policy: PolicyConfiguration,
    ownership: OwnershipMap,
) -> RunReport:
    """Diff every changed file in input order and reduce the results into one run report."""
    reports = tuple(
        _report_file(path, base=base, head=head, source=source, policy=policy, ownership=ownership)
        for path in changed_files
    )
    summary = reduce(lambda total, report: total + report.summary, reports, ChangeSummary())
    return RunReport(base=base, head=head, dir=directory, summary=summary, reports=reports)


def event_name_for(path: str) -> str:
    """Return the event name a schema file describes, its basename without extension."""
    return PurePosixPath(path).stem


def classify_file(path: str, *, base: str, head: str, source: SchemaRevisionSource) -> FileOutcome:
    """Retrieve both revisions of a file and decide which outcome applies."""
    try:
        old_text = source.get_file_at(base, path)
    except RevisionAccessError as exc:
        _LOGGER.debug("Failed to read %s at %s: %s", path, base, exc)
        return InvalidSchema(side="base")
    try:
        new_text = source.get_file_at(head, path)
    except RevisionAccessError as exc:
        _LOGGER.debug("Failed to read %s at %s: %s", path, head, exc)
        return InvalidSchema(side="head")

    if old_text is None and new_text is not None:
        return FileAdded()
    if old_text is not None and new_text is None:
        return FileRemoved()
    # Absent at both revisions: reported as invalid base JSON, never diffed as an empty pair.
    try:
        old_document = load_schema_document(old_text)
    except SchemaError:
        return InvalidSchema(side="base")
    try:
        new_document = load_schema_document(new_text)
    except SchemaError:
        return InvalidSchema(side="head")
    return SchemaPair(old_document=old_document, new_document=new_document)


def _report_file(
    path: str,
    *,
    base: str,
    head: str,
    source: SchemaRevisionSource,
    policy: PolicyConfiguration,
    ownership: OwnershipMap,
) -> FileReport:
    owner_teams = ownership.owners_for(event_name_for(path))
    outcome = classify_file(path, base=base, head=head, source=source)
    _LOGGER.debug("%s classified as %s", path, type(outcome).__name__)

    match outcome:
        case SchemaPair(old_document=old_document, new_document=new_document):
            diff = diff_schema_documents(old_document, new_document, owner_teams, policy)
            return FileReport(
                file=path, summary=diff.summary, changes=diff.changes, owner_teams=owner_teams
            )
        case FileAdded():
            kind, rule_key, message = (
                ChangeKind.FILE_ADDED,
                RuleKey.FILE_ADDED,
                f"Schema file added: {path}",
            )
        case FileRemoved():
            kind, rule_key, message = (
                ChangeKind.FILE_REMOVED,
                RuleKey.FILE_REMOVED,
                f"Schema file removed: {path}",
            )
        case InvalidSchema(side=side):
            kind, rule_key, message = (
                ChangeKind.INVALID_JSON,
                RuleKey.INVALID_JSON,
                f"Invalid JSON in {side} version of {path}.",
            )
        case _:
            assert_never(outcome)

    change = ChangeRecord(
        kind=kind,
        path=path,
        severity=severity_for(rule_key, owner_teams, policy),
        message=message,
    )
    return FileReport(
        file=path,
        summary=summarize_changes((change,)),
        changes=(change,),
        owner_teams=owner_teams,
    )
