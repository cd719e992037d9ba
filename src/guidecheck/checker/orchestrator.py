"""End-to-end check orchestration for Guidecheck.

Configuration is fully resolved into a rule set before any fact file is
read, so configuration errors abort a run with no partial results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from guidecheck.config import EffectiveRuleSelection, GuidecheckConfig, load_config, resolve_rule_selection
from guidecheck.engine import evaluate
from guidecheck.exceptions import ConfigurationError
from guidecheck.io import load_facts
from guidecheck.model import LintResult, Violation
from guidecheck.rules import RuleSet, build_builtin_rules

logger = logging.getLogger(__name__)


def build_rule_set(
    config: GuidecheckConfig,
    *,
    enable_rules: tuple[str, ...] = (),
    disable_rules: tuple[str, ...] = (),
) -> tuple[RuleSet, EffectiveRuleSelection]:
    """Resolve the enabled rule set for ``config`` plus CLI overrides."""
    catalog = build_builtin_rules(config.rule_options)
    selection = resolve_rule_selection(
        loaded_rule_ids=catalog.ids,
        config_toggles=config.rules,
        cli_enable_rules=enable_rules,
        cli_disable_rules=disable_rules,
    )
    for rule_id in selection.disabled_rule_ids:
        logger.debug("Rule %s disabled via %s", rule_id, selection.disable_sources[rule_id])
    return catalog.select(selection.executed_rule_ids), selection


def check_files(
    paths: Sequence[Path],
    *,
    root: Path,
    config_path: Path | None = None,
    enable_rules: tuple[str, ...] = (),
    disable_rules: tuple[str, ...] = (),
) -> LintResult:
    """Load config, read every fact file in order, and evaluate all facts."""
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigurationError(f"Root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    rules, selection = build_rule_set(config, enable_rules=enable_rules, disable_rules=disable_rules)

    violations: list[Violation] = []
    facts_checked = 0
    for path in paths:
        facts = load_facts(path)
        facts_checked += len(facts)
        violations.extend(evaluate(facts, rules))

    logger.debug(
        "Checked %d facts from %d files against %d rules in %.3fs",
        facts_checked,
        len(paths),
        len(rules),
        time.perf_counter() - started_at,
    )
    return LintResult(
        violations=tuple(violations),
        files_checked=len(paths),
        facts_checked=facts_checked,
        executed_rule_ids=selection.executed_rule_ids,
        disabled_rule_ids=selection.disabled_rule_ids,
    )
