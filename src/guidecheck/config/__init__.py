"""Configuration loading, validation, and rule selection for Guidecheck runs.

This package facade re-exports the public names so callers can use
``from guidecheck.config import ...``.
"""

from __future__ import annotations

from guidecheck.config.loader import load_config
from guidecheck.config.model import GuidecheckConfig
from guidecheck.config.selection import EffectiveRuleSelection, resolve_rule_selection
from guidecheck.config.validator import validate_config_file

__all__ = [
    "EffectiveRuleSelection",
    "GuidecheckConfig",
    "load_config",
    "resolve_rule_selection",
    "validate_config_file",
]
