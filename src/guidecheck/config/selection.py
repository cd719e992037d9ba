"""Rule execution set resolution for config and CLI enable/disable controls."""

from __future__ import annotations

from dataclasses import dataclass

from guidecheck.constants.config import (
    RULE_DISABLE_SOURCE_CLI_DISABLE,
    RULE_DISABLE_SOURCE_CONFIG,
    RuleDisableSource,
)
from guidecheck.exceptions import ConfigurationError


@dataclass(frozen=True)
class EffectiveRuleSelection:
    """Deterministic effective rule-selection output for a check run."""

    executed_rule_ids: tuple[str, ...]
    disabled_rule_ids: tuple[str, ...]
    disable_sources: dict[str, RuleDisableSource]


def resolve_rule_selection(
    *,
    loaded_rule_ids: tuple[str, ...],
    config_toggles: dict[str, bool],
    cli_enable_rules: tuple[str, ...] = (),
    cli_disable_rules: tuple[str, ...] = (),
) -> EffectiveRuleSelection:
    """Resolve executed/disabled rule ids; CLI flags take precedence over config.

    Executed and disabled ids keep ``loaded_rule_ids`` order.
    """
    loaded_set = set(loaded_rule_ids)
    _raise_unknown_rules("config rules", sorted(set(config_toggles) - loaded_set))
    _raise_unknown_rules("--enable", sorted(set(cli_enable_rules) - loaded_set))
    _raise_unknown_rules("--disable", sorted(set(cli_disable_rules) - loaded_set))

    conflicting = sorted(set(cli_enable_rules) & set(cli_disable_rules))
    if conflicting:
        raise ConfigurationError(f"Rule IDs both enabled and disabled: {', '.join(conflicting)}")

    cli_enable_set = set(cli_enable_rules)
    cli_disable_set = set(cli_disable_rules)
    config_disabled_set = {rule_id for rule_id, enabled in config_toggles.items() if not enabled}

    disable_sources: dict[str, RuleDisableSource] = {}
    for rule_id in loaded_rule_ids:
        if rule_id in cli_disable_set:
            disable_sources[rule_id] = RULE_DISABLE_SOURCE_CLI_DISABLE
        elif rule_id in config_disabled_set and rule_id not in cli_enable_set:
            disable_sources[rule_id] = RULE_DISABLE_SOURCE_CONFIG

    return EffectiveRuleSelection(
        executed_rule_ids=tuple(rule_id for rule_id in loaded_rule_ids if rule_id not in disable_sources),
        disabled_rule_ids=tuple(rule_id for rule_id in loaded_rule_ids if rule_id in disable_sources),
        disable_sources=disable_sources,
    )


def _raise_unknown_rules(source: str, unknown_rule_ids: list[str]) -> None:
    """Raise ConfigurationError when a rule selector names unknown rule ids."""
    if not unknown_rule_ids:
        return
    raise ConfigurationError(f"Unknown rule IDs for {source}: {', '.join(unknown_rule_ids)}")
