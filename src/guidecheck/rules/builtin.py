"""Built-in rules derived from the function-argument and CSS style guides."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

from guidecheck.constants.facts import DECLARATION, PARAMETER_LIST, SELECTOR
from guidecheck.constants.rules import (
    BUILTIN_RULE_IDS,
    DEFAULT_FORBIDDEN_PROPERTIES,
    DEFAULT_MAX_PARAMETERS,
    FORBIDDEN_PROPERTY,
    MAX_PARAMETERS,
    NO_BARE_ELEMENT_SELECTOR,
    RULE_OPTION_SPECS,
)
from guidecheck.exceptions import ConfigurationError
from guidecheck.model import DeclarationFact, ParameterListFact, SelectorFact
from guidecheck.rules.base import Rule
from guidecheck.rules.options import check_option_value
from guidecheck.rules.registry import RuleSet

logger = logging.getLogger(__name__)


def max_parameters_rule(*, max_count: int = DEFAULT_MAX_PARAMETERS) -> Rule:
    """Flag functions taking more than ``max_count`` positional parameters."""

    def predicate(fact: ParameterListFact) -> bool:
        return fact.count > max_count

    return Rule(
        rule_id=MAX_PARAMETERS,
        kind=PARAMETER_LIST,
        predicate=predicate,
        message="Function takes {count} positional parameters; at most {max} are allowed",
        description="Functions take at most a fixed number of positional parameters",
        params={"max": max_count},
    )


def no_bare_element_selector_rule() -> Rule:
    """Flag selectors that style an element without going through a class."""

    def predicate(fact: SelectorFact) -> bool:
        return fact.targets_bare_element

    return Rule(
        rule_id=NO_BARE_ELEMENT_SELECTOR,
        kind=SELECTOR,
        predicate=predicate,
        message="Selector targets a bare element; style it through a BEM class instead",
        description="Selectors target classes, never bare elements",
    )


def forbidden_property_rule(*, properties: Sequence[str] = DEFAULT_FORBIDDEN_PROPERTIES) -> Rule:
    """Flag declarations of any property in ``properties`` (case-insensitive)."""
    forbidden = frozenset(prop.strip().lower() for prop in properties)

    def predicate(fact: DeclarationFact) -> bool:
        return fact.property.strip().lower() in forbidden

    return Rule(
        rule_id=FORBIDDEN_PROPERTY,
        kind=DECLARATION,
        predicate=predicate,
        message="Property '{property}' is not allowed",
        description="Declarations avoid forbidden properties such as margin-bottom",
        params={"properties": tuple(sorted(forbidden))},
    )


_RULE_FACTORIES: dict[str, Callable[[Mapping[str, object]], Rule]] = {
    MAX_PARAMETERS: lambda options: max_parameters_rule(
        max_count=options.get("max", DEFAULT_MAX_PARAMETERS)  # type: ignore[arg-type]
    ),
    NO_BARE_ELEMENT_SELECTOR: lambda options: no_bare_element_selector_rule(),
    FORBIDDEN_PROPERTY: lambda options: forbidden_property_rule(
        properties=options.get("properties", DEFAULT_FORBIDDEN_PROPERTIES)  # type: ignore[arg-type]
    ),
}


def build_builtin_rules(options: Mapping[str, Mapping[str, object]] | None = None) -> RuleSet:
    """Build the built-in catalog in registration order, applying per-rule options.

    Raises ConfigurationError for options naming unknown rules, unknown
    option names, or ill-typed option values.
    """
    options = options or {}
    unknown = sorted(set(options) - set(BUILTIN_RULE_IDS))
    if unknown:
        raise ConfigurationError(f"Unknown rule IDs in rule_options: {', '.join(unknown)}")

    rules: list[Rule] = []
    for rule_id in BUILTIN_RULE_IDS:
        rule_options = options.get(rule_id, {})
        _raise_invalid_options(rule_id, rule_options)
        rules.append(_RULE_FACTORIES[rule_id](rule_options))
        logger.debug("Registered rule %s with options %r", rule_id, dict(rule_options))
    return RuleSet(rules)


def builtin_rule_descriptions() -> list[tuple[str, str, str]]:
    """Return ``(rule_id, kind, description)`` for every built-in rule."""
    return [(rule.rule_id, rule.kind, rule.description) for rule in build_builtin_rules()]


def _raise_invalid_options(rule_id: str, rule_options: Mapping[str, object]) -> None:
    """Raise ConfigurationError for the first invalid option of ``rule_id``."""
    specs = RULE_OPTION_SPECS[rule_id]
    for name in sorted(rule_options):
        if name not in specs:
            raise ConfigurationError(f"Unknown option `{name}` for rule {rule_id}")
        problem = check_option_value(specs[name], rule_options[name])
        if problem is not None:
            raise ConfigurationError(f"rule_options.{rule_id}.{name}: {problem.message}")
