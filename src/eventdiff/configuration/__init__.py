"""Configuration domain exports."""

from .loader import (
    DEFAULT_OWNERS_PATH,
    DEFAULT_POLICY_PATH,
    ConfigurationError,
    load_ownership_map,
    load_policy_configuration,
    parse_ownership_map,
    parse_policy_configuration,
)

__all__ = [
    "DEFAULT_OWNERS_PATH",
    "DEFAULT_POLICY_PATH",
    "ConfigurationError",
    "load_ownership_map",
    "load_policy_configuration",
    "parse_ownership_map",
    "parse_policy_configuration",
]
