"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


@dataclass(frozen=True)
class FieldDescriptor:
    """Flattened schema field definition for one dotted path."""

    path: str
    type: str
    nullable: bool
    required: bool
    enum: tuple[Any, ...] | None = None

    @property
    def type_label(self) -> str:
        """Return the type rendered the way change messages show it."""
        return f"{self.type} (nullable)" if self.nullable else self.type


SchemaSnapshot: TypeAlias = dict[str, FieldDescriptor]
