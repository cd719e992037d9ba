"""Tests for end-to-end check orchestration."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from guidecheck.checker import build_rule_set, check_files
from guidecheck.config import GuidecheckConfig
from guidecheck.exceptions import ConfigurationError, FactFileError
from guidecheck.model import Location

WriteFile = Callable[[str, str], Path]

CSS_FACTS = (
    "path: card.css\n"
    "facts:\n"
    "  - {kind: Selector, targetsBareElement: true, location: {line: 1}}\n"
    "  - {kind: Declaration, property: margin-bottom, location: {line: 2}}\n"
)
PY_FACTS = '[{"kind": "ParameterList", "count": 4, "location": {"path": "api.py", "line": 7}}]'


def test_check_files_evaluates_files_in_order(tmp_path: Path, write_file: WriteFile) -> None:
    css = write_file("facts/card.yaml", CSS_FACTS)
    py = write_file("facts/api.json", PY_FACTS)

    result = check_files([py, css], root=tmp_path)

    assert [(v.rule_id, v.location) for v in result.violations] == [
        ("max-parameters", Location("api.py", 7)),
        ("no-bare-element-selector", Location("card.css", 1)),
        ("forbidden-property", Location("card.css", 2)),
    ]
    assert result.files_checked == 2
    assert result.facts_checked == 3
    assert result.files_with_violations == 2
    assert result.disabled_rule_ids == ()


def test_config_disables_and_configures_rules(tmp_path: Path, write_file: WriteFile) -> None:
    write_file(
        "guidecheck.yaml",
        "rules:\n  forbidden-property: false\nrule_options:\n  max-parameters:\n    max: 4\n",
    )
    css = write_file("card.yaml", CSS_FACTS)
    py = write_file("api.json", PY_FACTS)

    result = check_files([css, py], root=tmp_path)

    assert [v.rule_id for v in result.violations] == ["no-bare-element-selector"]
    assert result.executed_rule_ids == ("max-parameters", "no-bare-element-selector")
    assert result.disabled_rule_ids == ("forbidden-property",)
    assert result.counts_by_rule == {"no-bare-element-selector": 1}


def test_cli_overrides_apply_on_top_of_config(tmp_path: Path, write_file: WriteFile) -> None:
    write_file("guidecheck.yaml", "rules:\n  forbidden-property: false\n")
    css = write_file("card.yaml", CSS_FACTS)

    result = check_files(
        [css],
        root=tmp_path,
        enable_rules=("forbidden-property",),
        disable_rules=("no-bare-element-selector",),
    )

    assert [v.rule_id for v in result.violations] == ["forbidden-property"]


def test_configuration_error_aborts_before_reading_facts(tmp_path: Path, write_file: WriteFile) -> None:
    write_file("guidecheck.yaml", "rules:\n  unknown-rule: true\n")

    with pytest.raises(ConfigurationError, match="unknown-rule"):
        check_files([tmp_path / "missing.json"], root=tmp_path)


def test_missing_root_is_a_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Root does not exist"):
        check_files([], root=tmp_path / "absent")


def test_bad_fact_file_propagates(tmp_path: Path, write_file: WriteFile) -> None:
    bad = write_file("bad.json", '{"facts": 3}')

    with pytest.raises(FactFileError, match="facts must be a list"):
        check_files([bad], root=tmp_path)


def test_build_rule_set_reports_selection() -> None:
    rules, selection = build_rule_set(
        GuidecheckConfig(rules={"max-parameters": False}),
        disable_rules=("forbidden-property",),
    )

    assert rules.ids == ("no-bare-element-selector",)
    assert selection.disable_sources == {
        "max-parameters": "config",
        "forbidden-property": "cli-disable",
    }
