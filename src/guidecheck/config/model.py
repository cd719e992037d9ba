"""Config data model for Guidecheck runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from guidecheck.types import RuleOptions


@dataclass(frozen=True)
class GuidecheckConfig:
    """Resolved checker config.

    ``rules`` maps rule ids to enabled (True) or disabled (False); rules not
    listed keep their default and run.
    """

    rules: dict[str, bool] = field(default_factory=dict)
    rule_options: RuleOptions = field(default_factory=dict)

    @property
    def disabled_rule_ids(self) -> tuple[str, ...]:
        return tuple(sorted(rule_id for rule_id, enabled in self.rules.items() if not enabled))
