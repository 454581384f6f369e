"""Schema management exports."""

from .enum_comparison import EnumDiff, enum_diff
from .schema_models import FieldDescriptor, SchemaSnapshot
from .schema_projection import SchemaError, flatten_schema, load_schema_document, normalize_type

__all__ = [
    "EnumDiff",
    "FieldDescriptor",
    "SchemaError",
    "SchemaSnapshot",
    "enum_diff",
    "flatten_schema",
    "load_schema_document",
    "normalize_type",
]
