"""Policy and ownership configuration loader."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from eventdiff.policy.policy_models import OwnershipMap, PolicyConfiguration
from eventdiff.policy.severity import Severity

DEFAULT_POLICY_PATH = Path(".eventdiff") / "policy.json"
DEFAULT_OWNERS_PATH = Path(".eventdiff") / "owners.json"

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a policy or ownership document is invalid."""


def load_policy_configuration(config_path: Path | str) -> PolicyConfiguration:
    """Load the policy file, falling back to built-in defaults when unusable."""
    try:
        return parse_policy_configuration(_read_document(Path(config_path)))
    except ConfigurationError as exc:
        _LOGGER.debug("Using built-in policy defaults: %s", exc)
        return PolicyConfiguration()


def load_ownership_map(config_path: Path | str) -> OwnershipMap:
    """Load the ownership file, falling back to empty ownership when unusable."""
    try:
        return parse_ownership_map(_read_document(Path(config_path)))
    except ConfigurationError as exc:
        _LOGGER.debug("Using empty ownership map: %s", exc)
        return OwnershipMap()


def parse_policy_configuration(document: Any) -> PolicyConfiguration:
    """Validate a parsed policy document.

    Args:
      document: Parsed document with optional `default` and `overrides` sections.

    Returns:
      The immutable policy configuration.

    Raises:
      ConfigurationError: If a section is not a mapping or a severity is unknown.
    """
    root = _require_mapping(document, "policy")
    default = _parse_rule_severities(root.get("default"), "default")
    overrides_section = _optional_mapping(root.get("overrides"), "overrides")
    overrides_by_owner = {
        str(team): _parse_rule_severities(rules, f"overrides.{team}")
        for team, rules in overrides_section.items()
    }
    return PolicyConfiguration(default=default, overrides_by_owner=overrides_by_owner)


def parse_ownership_map(document: Any) -> OwnershipMap:
    """Validate a parsed ownership document mapping event names to teams."""
    root = _require_mapping(document, "owners")
    return OwnershipMap(
        owners_by_event={
            str(event_name): _normalize_team_list(teams, str(event_name))
            for event_name, teams in root.items()
        }
    )


def _read_document(path: Path) -> Any:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    # JSON first: YAML rejects tab indentation, which JSON permits.
    try:
        return json.loads(text)
    except ValueError:
        pass
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {exc}") from exc


def _parse_rule_severities(value: Any, section_name: str) -> dict[str, Severity]:
    section = _optional_mapping(value, section_name)
    severities: dict[str, Severity] = {}
    for rule_key, raw_severity in section.items():
        if not isinstance(raw_severity, str):
            raise ConfigurationError(f"{section_name}.{rule_key} must be a string.")
        try:
            severities[str(rule_key)] = Severity(raw_severity.strip().lower())
        except ValueError as exc:
            raise ConfigurationError(
                f"{section_name}.{rule_key} has unknown severity '{raw_severity}'."
            ) from exc
    return severities


def _normalize_team_list(value: Any, event_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        teams = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"Owners of '{event_name}' must be strings.")
            stripped = item.strip()
            if stripped:
                teams.append(stripped)
        return tuple(teams)
    raise ConfigurationError(f"Owners of '{event_name}' must be a string or list of strings.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)
