"""Schema diff domain exports."""

from .change_models import (
    ChangeKind,
    ChangeRecord,
    ChangeSummary,
    Decision,
    FileReport,
    RunReport,
    SchemaDiff,
    summarize_changes,
)
from .schema_differ import diff_schema_documents, diff_schemas

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "ChangeSummary",
    "Decision",
    "FileReport",
    "RunReport",
    "SchemaDiff",
    "diff_schema_documents",
    "diff_schemas",
    "summarize_changes",
]
