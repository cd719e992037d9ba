"""Rule record and message rendering."""

from __future__ import annotations

import string
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from guidecheck.constants.rules import RULE_ID_PATTERN
from guidecheck.exceptions import ConfigurationError

Predicate: TypeAlias = Callable[[Any], bool]

_FORMATTER = string.Formatter()


def _placeholder(field_name: str, format_spec: str, conversion: str | None) -> str:
    """Rebuild a replacement field exactly as written in the template."""
    text = field_name
    if conversion:
        text += f"!{conversion}"
    if format_spec:
        text += f":{format_spec}"
    return "{" + text + "}"


def render_template(template: str, values: Mapping[str, object]) -> str:
    """Fill named fields of ``template`` from ``values``.

    Fields that are positional, dotted, indexed, absent from ``values`` or
    whose value rejects the format spec are copied through unchanged.
    """
    parts: list[str] = []
    for literal, field_name, format_spec, conversion in _FORMATTER.parse(template):
        parts.append(literal)
        if field_name is None:
            continue
        if field_name in values:
            try:
                value = _FORMATTER.convert_field(values[field_name], conversion)
                parts.append(_FORMATTER.format_field(value, format_spec or ""))
                continue
            except (ValueError, TypeError):
                pass
        parts.append(_placeholder(field_name, format_spec or "", conversion))
    return "".join(parts)


@dataclass(frozen=True)
class Rule:
    """A named, stateless predicate over facts of one kind.

    ``message`` is a ``str.format``-style template. Placeholders are filled
    from the fact's attributes and then from ``params``, so a fact attribute
    wins over a rule parameter of the same name. A template that cannot be
    parsed at all (an unmatched brace) is rejected when the rule is built.
    """

    rule_id: str
    kind: str
    predicate: Predicate
    message: str
    description: str = ""
    params: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not isinstance(self.rule_id, str) or not RULE_ID_PATTERN.match(self.rule_id):
            raise ConfigurationError(f"Rule id must be kebab-case (got {self.rule_id!r})")
        if not isinstance(self.message, str):
            raise ConfigurationError(f"Rule {self.rule_id} message must be a string")
        try:
            list(_FORMATTER.parse(self.message))
        except ValueError as exc:
            raise ConfigurationError(f"Rule {self.rule_id} has a malformed message template: {exc}") from exc
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def render(self, fact: Any) -> str:
        """Fill the message template for ``fact``."""
        values: dict[str, object] = dict(self.params)
        values.update(fact.attributes())
        return render_template(self.message, values)
