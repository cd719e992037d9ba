"""Rule engine: evaluate facts against a rule set and collect violations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from guidecheck.model import Fact, Violation
from guidecheck.rules import Rule, RuleSet

logger = logging.getLogger(__name__)


def evaluate(facts: Iterable[Fact], rules: RuleSet | Iterable[Rule]) -> tuple[Violation, ...]:
    """Return violations for ``facts`` under ``rules``.

    Output order is fact order, then rule registration order. Each fact is
    checked independently; facts of a kind no rule handles are skipped.
    A plain iterable of rules is loaded into a :class:`RuleSet` first, so
    duplicate identifiers raise ConfigurationError before any fact is seen.
    """
    rule_set = rules if isinstance(rules, RuleSet) else RuleSet(rules)

    violations: list[Violation] = []
    for fact in facts:
        applicable = rule_set.rules_for(fact.kind)
        if not applicable:
            logger.debug("No rules for fact kind %s; skipping", fact.kind)
            continue
        for rule in applicable:
            if rule.predicate(fact):
                violations.append(
                    Violation(
                        rule_id=rule.rule_id,
                        message=rule.render(fact),
                        location=fact.location,
                    )
                )
    return tuple(violations)
