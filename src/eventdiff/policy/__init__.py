"""Severity policy exports."""

from .policy_models import OwnershipMap, PolicyConfiguration
from .policy_resolver import severity_for
from .rule_keys import BUILT_IN_SEVERITIES, RuleKey
from .severity import Severity, strictest

__all__ = [
    "BUILT_IN_SEVERITIES",
    "OwnershipMap",
    "PolicyConfiguration",
    "RuleKey",
    "Severity",
    "severity_for",
    "strictest",
]
