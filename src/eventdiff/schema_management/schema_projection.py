"""Schema loading and flattening service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .schema_models import FieldDescriptor, SchemaSnapshot

_NULL_TYPE = "null"
_UNKNOWN_TYPE = "unknown"


class SchemaError(Exception):
    """Raised for schema parsing failures."""


def load_schema_document(text: str | None) -> Any:
    """Parse schema text into a structured document."""
    if text is None:
        raise SchemaError("Schema text is missing.")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise SchemaError(f"Invalid JSON schema: {exc}") from exc


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON literals.
    raise ValueError(f"Unsupported JSON constant: {name}")


def normalize_type(declared: Any) -> tuple[str, bool]:
    """Return the normalized type label and nullability of a `type` declaration."""
    if isinstance(declared, list):
        names = {value for value in declared if isinstance(value, str)}
        nullable = _NULL_TYPE in names
        rest = sorted(names - {_NULL_TYPE})
        return ("|".join(rest) if rest else _UNKNOWN_TYPE), nullable
    if isinstance(declared, str):
        return declared, False
    return _UNKNOWN_TYPE, False


def flatten_schema(document: Any) -> SchemaSnapshot:
    """Return the dotted-path snapshot of a schema document.

    The root node is traversed but never recorded. Nodes without an object
    `properties` map are leaves.
    """
    fields: SchemaSnapshot = {}
    _flatten_node(document, path="", required_paths=frozenset(), fields=fields)
    return fields


def _flatten_node(
    node: Any, *, path: str, required_paths: frozenset[str], fields: SchemaSnapshot
) -> None:
    if node is None:
        return
    definition: Mapping[str, Any] = node if isinstance(node, Mapping) else {}
    type_name, nullable = normalize_type(definition.get("type"))

    if path:
        fields[path] = FieldDescriptor(
            path=path,
            type=type_name,
            nullable=nullable,
            required=path in required_paths,
            enum=_enum_values(definition.get("enum")),
        )

    properties = definition.get("properties")
    if not isinstance(properties, Mapping):
        return
    child_required = _child_required_paths(path, definition.get("required"))
    for key, child in properties.items():
        _flatten_node(
            child,
            path=_child_path(path, str(key)),
            required_paths=child_required,
            fields=fields,
        )


def _child_required_paths(path: str, required: Any) -> frozenset[str]:
    if not isinstance(required, list):
        return frozenset()
    return frozenset(_child_path(path, name) for name in required if isinstance(name, str))


def _child_path(prefix: str, key: str) -> str:
    return key if not prefix else f"{prefix}.{key}"


def _enum_values(value: Any) -> tuple[Any, ...] | None:
    return tuple(value) if isinstance(value, list) else None
