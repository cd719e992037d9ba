"""Value checks for per-rule options, shared by the loader and validator."""

from __future__ import annotations

from dataclasses import dataclass

from guidecheck.constants.rules import OPTION_POSITIVE_INT, OPTION_STRING_LIST


@dataclass(frozen=True)
class OptionProblem:
    """Why an option value was rejected."""

    message: str
    out_of_range: bool = False


def check_option_value(value_kind: str, value: object) -> OptionProblem | None:
    """Return the problem with ``value``, or None when it is valid."""
    if value_kind == OPTION_POSITIVE_INT:
        if isinstance(value, bool) or not isinstance(value, int):
            return OptionProblem("expected a positive integer")
        if value <= 0:
            return OptionProblem(f"must be a positive integer, got {value}", out_of_range=True)
        return None
    if value_kind == OPTION_STRING_LIST:
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            return OptionProblem("expected a list of strings")
        if not all(item.strip() for item in value):
            return OptionProblem("entries must be non-empty strings", out_of_range=True)
        return None
    raise ValueError(f"Unknown option value kind: {value_kind!r}")
