"""Structural facts observed by an external extractor.

Each fact kind is a frozen dataclass carrying a ``kind`` tag, its own
attributes, and an optional :class:`Location`. Facts whose kind Guidecheck
does not know are kept as :class:`OpaqueFact` so that rule evaluation can
skip them instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import ClassVar, TypeAlias

from guidecheck.constants.facts import DECLARATION, PARAMETER_LIST, SELECTOR
from guidecheck.model.entities import Location


class _AttributeFact:
    """Mixin exposing dataclass fields (minus location) as template values."""

    def attributes(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "location"}  # type: ignore[arg-type]


@dataclass(frozen=True)
class ParameterListFact(_AttributeFact):
    """A function signature with ``count`` positional parameters."""

    kind: ClassVar[str] = PARAMETER_LIST

    count: int
    location: Location | None = None


@dataclass(frozen=True)
class SelectorFact(_AttributeFact):
    """A CSS selector, flagged when it targets an element without a class."""

    kind: ClassVar[str] = SELECTOR

    targets_bare_element: bool
    location: Location | None = None


@dataclass(frozen=True)
class DeclarationFact(_AttributeFact):
    """A CSS declaration of ``property``."""

    kind: ClassVar[str] = DECLARATION

    property: str
    location: Location | None = None


@dataclass(frozen=True)
class OpaqueFact:
    """A fact of a kind no rule is defined for."""

    kind: str
    data: dict[str, object] = field(default_factory=dict, hash=False)
    location: Location | None = None

    def attributes(self) -> dict[str, object]:
        return dict(self.data)


Fact: TypeAlias = ParameterListFact | SelectorFact | DeclarationFact | OpaqueFact
