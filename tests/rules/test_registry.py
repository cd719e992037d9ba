"""Tests for the ordered rule set container."""

from __future__ import annotations

import pytest

from guidecheck.constants.facts import DECLARATION, PARAMETER_LIST, SELECTOR
from guidecheck.exceptions import ConfigurationError
from guidecheck.rules import Rule, RuleSet


def _rule(rule_id: str, kind: str = PARAMETER_LIST) -> Rule:
    return Rule(rule_id=rule_id, kind=kind, predicate=lambda fact: True, message=rule_id)


def test_rule_set_keeps_registration_order() -> None:
    rules = RuleSet([_rule("zeta"), _rule("alpha"), _rule("mid")])

    assert rules.ids == ("zeta", "alpha", "mid")
    assert [rule.rule_id for rule in rules] == ["zeta", "alpha", "mid"]
    assert len(rules) == 3


def test_duplicate_ids_raise_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="Duplicate rule IDs: alpha, beta"):
        RuleSet([_rule("beta"), _rule("alpha"), _rule("beta"), _rule("alpha")])


def test_membership_and_lookup() -> None:
    alpha = _rule("alpha")
    rules = RuleSet([alpha])

    assert "alpha" in rules
    assert "beta" not in rules
    assert rules.get("alpha") is alpha
    assert rules.get("beta") is None


def test_rules_for_groups_by_kind_in_registration_order() -> None:
    rules = RuleSet(
        [
            _rule("p-one"),
            _rule("s-one", SELECTOR),
            _rule("p-two"),
        ]
    )

    assert [rule.rule_id for rule in rules.rules_for(PARAMETER_LIST)] == ["p-one", "p-two"]
    assert [rule.rule_id for rule in rules.rules_for(SELECTOR)] == ["s-one"]
    assert rules.rules_for(DECLARATION) == ()


def test_select_preserves_registration_order() -> None:
    rules = RuleSet([_rule("a"), _rule("b"), _rule("c")])

    subset = rules.select(["c", "a"])

    assert subset.ids == ("a", "c")


def test_select_unknown_rule_id_raises() -> None:
    rules = RuleSet([_rule("a")])

    with pytest.raises(ConfigurationError, match="Unknown rule IDs: missing"):
        rules.select(["a", "missing"])


@pytest.mark.parametrize("rule_id", ["Max_Params", "max_params", "-lead", "", "trailing-"])
def test_rule_ids_must_be_kebab_case(rule_id: str) -> None:
    with pytest.raises(ConfigurationError, match="kebab-case"):
        _rule(rule_id)
