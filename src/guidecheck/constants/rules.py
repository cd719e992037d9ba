"""Built-in rule identifiers and option defaults."""

from __future__ import annotations

import re

RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$")

MAX_PARAMETERS: str = "max-parameters"
NO_BARE_ELEMENT_SELECTOR: str = "no-bare-element-selector"
FORBIDDEN_PROPERTY: str = "forbidden-property"

# Registration order of the built-in catalog; evaluation output follows it.
BUILTIN_RULE_IDS: tuple[str, ...] = (
    MAX_PARAMETERS,
    NO_BARE_ELEMENT_SELECTOR,
    FORBIDDEN_PROPERTY,
)

DEFAULT_MAX_PARAMETERS: int = 3
DEFAULT_FORBIDDEN_PROPERTIES: tuple[str, ...] = ("margin-bottom",)

OPTION_POSITIVE_INT: str = "positive_int"
OPTION_STRING_LIST: str = "string_list"

# Option name -> value kind, per rule.
RULE_OPTION_SPECS: dict[str, dict[str, str]] = {
    MAX_PARAMETERS: {"max": OPTION_POSITIVE_INT},
    NO_BARE_ELEMENT_SELECTOR: {},
    FORBIDDEN_PROPERTY: {"properties": OPTION_STRING_LIST},
}
