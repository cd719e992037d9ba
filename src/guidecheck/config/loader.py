"""Config loading and normalization for Guidecheck runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from guidecheck.config.model import GuidecheckConfig
from guidecheck.constants.config import CONFIG_FILENAME
from guidecheck.constants.rules import BUILTIN_RULE_IDS, RULE_OPTION_SPECS
from guidecheck.exceptions import ConfigurationError
from guidecheck.rules.options import check_option_value
from guidecheck.types import RuleOptions

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> GuidecheckConfig:
    """Load and validate checker config from ``guidecheck.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigurationError(f"Config file not found: {path}")
        logger.debug("No config file at %s; using defaults", path)
        return GuidecheckConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"Config file at {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file at {path} must be a YAML mapping")

    logger.debug("Loaded config from %s", path)
    return GuidecheckConfig(
        rules=_parse_rule_toggles(_ensure_mapping(raw.get("rules"), "rules")),
        rule_options=_parse_rule_options(_ensure_mapping(raw.get("rule_options"), "rule_options")),
    )


def _ensure_mapping(value: Any, key_name: str) -> dict[Any, Any]:
    """Coerce a value to a mapping, raising ConfigurationError on type mismatch."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{key_name} must be a mapping")
    return value


def _raise_unknown_rule_ids(key_name: str, rule_ids: list[str]) -> None:
    unknown = sorted(rule_id for rule_id in rule_ids if rule_id not in BUILTIN_RULE_IDS)
    if unknown:
        raise ConfigurationError(f"Unknown rule IDs in {key_name}: {', '.join(unknown)}")


def _parse_rule_toggles(raw: dict[Any, Any]) -> dict[str, bool]:
    """Validate the ``rules`` block: known rule ids mapped to booleans."""
    if not all(isinstance(key, str) for key in raw):
        raise ConfigurationError("rules keys must be rule id strings")
    _raise_unknown_rule_ids("rules", list(raw))
    for rule_id, enabled in raw.items():
        if not isinstance(enabled, bool):
            raise ConfigurationError(f"rules.{rule_id} must be a boolean")
    return dict(raw)


def _parse_rule_options(raw: dict[Any, Any]) -> RuleOptions:
    """Validate the ``rule_options`` block against each rule's option specs."""
    if not all(isinstance(key, str) for key in raw):
        raise ConfigurationError("rule_options keys must be rule id strings")
    _raise_unknown_rule_ids("rule_options", list(raw))

    options: RuleOptions = {}
    for rule_id, rule_raw in raw.items():
        rule_options = _ensure_mapping(rule_raw, f"rule_options.{rule_id}")
        specs = RULE_OPTION_SPECS[rule_id]
        for name, value in rule_options.items():
            if name not in specs:
                raise ConfigurationError(f"Unknown option `{name}` for rule {rule_id}")
            problem = check_option_value(specs[name], value)
            if problem is not None:
                raise ConfigurationError(f"rule_options.{rule_id}.{name}: {problem.message}")
        options[rule_id] = dict(rule_options)
    return options
