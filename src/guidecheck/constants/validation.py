"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # unknown rule id
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # invalid nested mapping
CFG009: str = "CFG009"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"rules", "rule_options"})
