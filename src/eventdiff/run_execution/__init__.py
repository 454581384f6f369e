"""Run execution domain exports."""

from .run_contracts import (
    FileAdded,
    FileOutcome,
    FileRemoved,
    InvalidSchema,
    RunRequest,
    SchemaPair,
    SchemaRevisionSource,
)
from .schema_gate_run_use_case import (
    classify_file,
    event_name_for,
    execute_schema_gate_run,
    run_schema_diff,
)

__all__ = [
    "FileAdded",
    "FileOutcome",
    "FileRemoved",
    "InvalidSchema",
    "RunRequest",
    "SchemaPair",
    "SchemaRevisionSource",
    "classify_file",
    "event_name_for",
    "execute_schema_gate_run",
    "run_schema_diff",
]
