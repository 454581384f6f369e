"""Rule severity resolution with strictest-wins owner overrides."""

from __future__ import annotations

from collections.abc import Iterable

from .policy_models import PolicyConfiguration
from .rule_keys import BUILT_IN_SEVERITIES, RuleKey
from .severity import Severity, strictest


def severity_for(
    rule_key: RuleKey | str,
    owner_teams: Iterable[str],
    policy: PolicyConfiguration,
) -> Severity:
    """Return the effective severity of a rule for the given owning teams.

    Owner overrides can only raise the configured default, never lower it.
    """
    key = rule_key.value if isinstance(rule_key, RuleKey) else rule_key
    severity = policy.default.get(key) or BUILT_IN_SEVERITIES.get(key) or Severity.WARN
    for team in owner_teams:
        override = policy.overrides_by_owner.get(team, {}).get(key)
        if override is not None:
            severity = strictest(severity, override)
    return severity
