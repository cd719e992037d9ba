"""Immutable, ordered rule set with unique identifiers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator

from guidecheck.exceptions import ConfigurationError
from guidecheck.rules.base import Rule


class RuleSet:
    """Rules in registration order, indexed by id and by fact kind.

    Construction is the load step: duplicate identifiers raise
    :class:`ConfigurationError` and nothing is registered.
    """

    __slots__ = ("_by_id", "_by_kind", "_rules")

    def __init__(self, rules: Iterable[Rule] = ()) -> None:
        ordered = tuple(rules)
        duplicates = sorted(rule_id for rule_id, n in Counter(r.rule_id for r in ordered).items() if n > 1)
        if duplicates:
            raise ConfigurationError(f"Duplicate rule IDs: {', '.join(duplicates)}")

        by_kind: dict[str, list[Rule]] = {}
        for rule in ordered:
            by_kind.setdefault(rule.kind, []).append(rule)

        self._rules: tuple[Rule, ...] = ordered
        self._by_id: dict[str, Rule] = {rule.rule_id: rule for rule in ordered}
        self._by_kind: dict[str, tuple[Rule, ...]] = {kind: tuple(group) for kind, group in by_kind.items()}

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def __repr__(self) -> str:
        return f"RuleSet({list(self.ids)!r})"

    @property
    def ids(self) -> tuple[str, ...]:
        return tuple(rule.rule_id for rule in self._rules)

    def get(self, rule_id: str) -> Rule | None:
        return self._by_id.get(rule_id)

    def rules_for(self, kind: str) -> tuple[Rule, ...]:
        """Rules applying to ``kind``, in registration order."""
        return self._by_kind.get(kind, ())

    def select(self, rule_ids: Iterable[str]) -> RuleSet:
        """Return the subset with the given ids, keeping registration order."""
        wanted = set(rule_ids)
        unknown = sorted(wanted - self._by_id.keys())
        if unknown:
            raise ConfigurationError(f"Unknown rule IDs: {', '.join(unknown)}")
        return RuleSet(rule for rule in self._rules if rule.rule_id in wanted)
