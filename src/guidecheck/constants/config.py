"""Configuration defaults and filenames."""

from __future__ import annotations

from typing import Literal

CONFIG_FILENAME: str = "guidecheck.yaml"

RuleDisableSource = Literal["config", "cli-disable"]

RULE_DISABLE_SOURCE_CONFIG: RuleDisableSource = "config"
RULE_DISABLE_SOURCE_CLI_DISABLE: RuleDisableSource = "cli-disable"
