"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Protocol, TypeAlias

DEFAULT_SCHEMA_DIR = "schemas"


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one gate run."""

    base: str
    head: str
    directory: str = DEFAULT_SCHEMA_DIR


class SchemaRevisionSource(Protocol):
    """Access to schema files at revisions, implemented by git and by test fakes."""

    def get_file_at(self, revision: str, path: str) -> str | None: ...

    def list_changed_files(self, base: str, head: str, directory: str) -> list[str]: ...


@dataclass(frozen=True)
class FileAdded:
    """Schema file exists only at the head revision."""


@dataclass(frozen=True)
class FileRemoved:
    """Schema file exists only at the base revision."""


@dataclass(frozen=True)
class InvalidSchema:
    """One side of the schema file could not be read or parsed."""

    side: Literal["base", "head"]


@dataclass(frozen=True)
class SchemaPair:
    """Both revisions parsed successfully."""

    old_document: Any
    new_document: Any


FileOutcome: TypeAlias = FileAdded | FileRemoved | InvalidSchema | SchemaPair
