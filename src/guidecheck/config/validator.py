"""Config file validation for Guidecheck runs."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from guidecheck.constants.config import CONFIG_FILENAME
from guidecheck.constants.rules import BUILTIN_RULE_IDS, RULE_OPTION_SPECS
from guidecheck.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
)
from guidecheck.exceptions.validation import ValidationError
from guidecheck.rules.options import check_option_value


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a guidecheck.yaml file and return all validation errors.

    This is the collect-all entry point used by both ``guidecheck
    validate-config`` and ``guidecheck check`` preflight. It never raises;
    all problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors
    except UnicodeDecodeError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"config file is not valid UTF-8: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    _validate_rules_block(raw, path_str, errors)
    _validate_rule_options_block(raw, path_str, errors)

    return errors


def _nested_mapping(
    raw: dict[str, Any],
    key: str,
    path_str: str,
    errors: list[ValidationError],
) -> dict[Any, Any] | None:
    """Return ``raw[key]`` when it is a mapping; record CFG008 otherwise."""
    block = raw.get(key)
    if block is None:
        return None
    if not isinstance(block, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=key,
                message=f"`{key}` must be a mapping",
            )
        )
        return None
    return block


def _unknown_rule_error(rule_id: object, field: str, path_str: str) -> ValidationError:
    return ValidationError(
        code=CFG006,
        path=path_str,
        field=field,
        message=f"unknown rule id `{rule_id}`",
        hint=_suggest_key(str(rule_id), frozenset(BUILTIN_RULE_IDS)),
    )


def _validate_rules_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``rules`` mapping of rule id to enabled flag."""
    block = _nested_mapping(raw, "rules", path_str, errors)
    if block is None:
        return

    for rule_id in sorted(block.keys(), key=str):
        field = f"rules.{rule_id}"
        if rule_id not in BUILTIN_RULE_IDS:
            errors.append(_unknown_rule_error(rule_id, field, path_str))
            continue
        if not isinstance(block[rule_id], bool):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=field,
                    message=f"invalid type for `{field}`",
                    hint="expected true (enabled) or false (disabled)",
                )
            )


def _validate_rule_options_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``rule_options`` mapping against each rule's option specs."""
    block = _nested_mapping(raw, "rule_options", path_str, errors)
    if block is None:
        return

    for rule_id in sorted(block.keys(), key=str):
        field = f"rule_options.{rule_id}"
        if rule_id not in BUILTIN_RULE_IDS:
            errors.append(_unknown_rule_error(rule_id, field, path_str))
            continue

        options = block[rule_id]
        if options is None:
            continue
        if not isinstance(options, dict):
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue

        specs = RULE_OPTION_SPECS[rule_id]
        for name in sorted(options.keys(), key=str):
            option_field = f"{field}.{name}"
            if name not in specs:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=option_field,
                        message=f"unknown option `{name}` for rule `{rule_id}`",
                        hint=_suggest_key(str(name), frozenset(specs)) if specs else "rule takes no options",
                    )
                )
                continue
            problem = check_option_value(specs[name], options[name])
            if problem is not None:
                errors.append(
                    ValidationError(
                        code=CFG007 if problem.out_of_range else CFG005,
                        path=path_str,
                        field=option_field,
                        message=f"invalid value for `{option_field}`",
                        hint=problem.message,
                    )
                )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
