"""Cross-module type aliases."""

from __future__ import annotations

from typing import TypeAlias

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

# rule id -> option name -> value
RuleOptions: TypeAlias = dict[str, dict[str, object]]
