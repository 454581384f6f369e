"""Policy rule keys and their built-in severities."""

from __future__ import annotations

from enum import Enum

from .severity import Severity


class RuleKey(str, Enum):
    """Change classifications a policy can assign a severity to."""

    FIELD_REMOVED_REQUIRED = "FIELD_REMOVED_REQUIRED"
    FIELD_REMOVED_OPTIONAL = "FIELD_REMOVED_OPTIONAL"
    FIELD_ADDED_REQUIRED = "FIELD_ADDED_REQUIRED"
    FIELD_ADDED_OPTIONAL = "FIELD_ADDED_OPTIONAL"
    REQUIRED_BECOMES_REQUIRED = "REQUIRED_BECOMES_REQUIRED"
    REQUIRED_BECOMES_OPTIONAL = "REQUIRED_BECOMES_OPTIONAL"
    TYPE_CHANGED = "TYPE_CHANGED"
    ENUM_VALUE_REMOVED = "ENUM_VALUE_REMOVED"
    ENUM_VALUE_ADDED = "ENUM_VALUE_ADDED"
    FILE_REMOVED = "FILE_REMOVED"
    FILE_ADDED = "FILE_ADDED"
    INVALID_JSON = "INVALID_JSON"


BUILT_IN_SEVERITIES: dict[str, Severity] = {
    RuleKey.FIELD_REMOVED_REQUIRED.value: Severity.BLOCK,
    RuleKey.FIELD_REMOVED_OPTIONAL.value: Severity.WARN,
    RuleKey.FIELD_ADDED_REQUIRED.value: Severity.BLOCK,
    RuleKey.FIELD_ADDED_OPTIONAL.value: Severity.PASS,
    RuleKey.REQUIRED_BECOMES_REQUIRED.value: Severity.BLOCK,
    RuleKey.REQUIRED_BECOMES_OPTIONAL.value: Severity.WARN,
    RuleKey.TYPE_CHANGED.value: Severity.BLOCK,
    RuleKey.ENUM_VALUE_REMOVED.value: Severity.BLOCK,
    RuleKey.ENUM_VALUE_ADDED.value: Severity.PASS,
    RuleKey.FILE_REMOVED.value: Severity.BLOCK,
    RuleKey.FILE_ADDED.value: Severity.PASS,
    RuleKey.INVALID_JSON.value: Severity.BLOCK,
}
