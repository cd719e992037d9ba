"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from guidecheck.cli.main import build_parser, main

WriteFile = Callable[[str, str], Path]

FACTS = (
    "path: card.css\n"
    "facts:\n"
    "  - {kind: Declaration, property: margin-bottom, location: {line: 2, column: 5}}\n"
    "  - {kind: ParameterList, count: 2, location: {path: api.py, line: 9}}\n"
)
CLEAN_FACTS = '[{"kind": "Declaration", "property": "margin-top"}]'


def test_build_parser_accepts_check_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        [
            "check",
            "a.json",
            "b.yaml",
            "--root",
            str(tmp_path),
            "--disable",
            "max-parameters",
            "--disable",
            "forbidden-property",
            "--format",
            "json",
        ]
    )

    assert args.command == "check"
    assert args.facts == [Path("a.json"), Path("b.yaml")]
    assert args.root == tmp_path
    assert args.disable == ["max-parameters", "forbidden-property"]
    assert args.format == "json"


@pytest.mark.parametrize(
    ("short_args", "long_args"),
    [
        pytest.param(["check", "f.json", "-r", "."], ["check", "f.json", "--root", "."], id="root"),
        pytest.param(["check", "f.json", "-c", "g.yaml"], ["check", "f.json", "--config", "g.yaml"], id="config"),
        pytest.param(
            ["check", "f.json", "-e", "a", "-e", "b"],
            ["check", "f.json", "--enable", "a", "--enable", "b"],
            id="enable-repeatable",
        ),
        pytest.param(["check", "f.json", "-d", "a"], ["check", "f.json", "--disable", "a"], id="disable"),
        pytest.param(["check", "f.json", "-F", "json"], ["check", "f.json", "--format", "json"], id="format"),
        pytest.param(["check", "f.json", "-o", "r.json"], ["check", "f.json", "--output", "r.json"], id="output"),
        pytest.param(["check", "f.json", "-v"], ["check", "f.json", "--verbose"], id="verbose"),
    ],
)
def test_shorthand_equivalent_to_long_form(short_args: list[str], long_args: list[str]) -> None:
    """Short flags produce the same parsed namespace as long-form flags."""
    parser = build_parser()
    assert vars(parser.parse_args(short_args)) == vars(parser.parse_args(long_args))


def test_check_requires_fact_files() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["check"])


def test_check_reports_violations_and_exits_one(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    facts = write_file("facts.yaml", FACTS)

    exit_code = main(["check", str(facts), "--root", str(tmp_path), "--no-color"])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "card.css:2:5  forbidden-property  Property 'margin-bottom' is not allowed" in out
    assert "1 violation in 1 file (1 file checked)" in out


def test_check_clean_facts_exit_zero(tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]) -> None:
    facts = write_file("facts.json", CLEAN_FACTS)

    exit_code = main(["check", str(facts), "--root", str(tmp_path)])

    assert exit_code == 0
    assert "No violations" in capsys.readouterr().out


def test_check_json_format_and_output_file(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    facts = write_file("facts.yaml", FACTS)
    report_path = tmp_path / "reports" / "guidecheck.json"

    exit_code = main(["check", str(facts), "-r", str(tmp_path), "-F", "json", "-o", str(report_path)])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["total_violations"] == 1
    assert payload["violations"][0] == {
        "rule_id": "forbidden-property",
        "message": "Property 'margin-bottom' is not allowed",
        "location": {"path": "card.css", "line": 2, "column": 5},
    }
    assert json.loads(report_path.read_text(encoding="utf-8")) == payload


def test_check_disable_flag_silences_rule(tmp_path: Path, write_file: WriteFile) -> None:
    facts = write_file("facts.yaml", FACTS)

    assert main(["check", str(facts), "-r", str(tmp_path), "-d", "forbidden-property"]) == 0


def test_check_invalid_config_exits_two(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    write_file("guidecheck.yaml", "rules:\n  max-parameter: false\n")
    facts = write_file("facts.yaml", FACTS)

    exit_code = main(["check", str(facts), "-r", str(tmp_path)])

    assert exit_code == 2
    err = capsys.readouterr().err
    assert "[CFG006]" in err
    assert "did you mean `max-parameters`?" in err


def test_check_unknown_cli_rule_exits_two(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    facts = write_file("facts.yaml", FACTS)

    exit_code = main(["check", str(facts), "-r", str(tmp_path), "--enable", "no-such-rule"])

    assert exit_code == 2
    assert "Configuration error: Unknown rule IDs for --enable: no-such-rule" in capsys.readouterr().err


def test_check_bad_fact_file_exits_two(
    tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]
) -> None:
    facts = write_file("facts.json", '[{"kind": "ParameterList"}]')

    exit_code = main(["check", str(facts), "-r", str(tmp_path)])

    assert exit_code == 2
    assert "Fact file error:" in capsys.readouterr().err


def test_check_non_utf8_fact_file_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    facts = tmp_path / "facts.yaml"
    facts.write_bytes(b"- {kind: Declaration, property: \xff}\n")

    exit_code = main(["check", str(facts), "-r", str(tmp_path)])

    assert exit_code == 2
    assert "not valid UTF-8" in capsys.readouterr().err


def test_validate_config_valid(tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]) -> None:
    write_file("guidecheck.yaml", "rules:\n  max-parameters: true\n")

    assert main(["validate-config", "-r", str(tmp_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_invalid(tmp_path: Path, write_file: WriteFile, capsys: pytest.CaptureFixture[str]) -> None:
    write_file("guidecheck.yaml", "rule_options:\n  max-parameters:\n    max: 0\n")

    assert main(["validate-config", "-r", str(tmp_path)]) == 2
    assert "[CFG007]" in capsys.readouterr().err


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate-config", "-r", str(tmp_path), "-c", str(tmp_path / "nope.yaml")]) == 2
    assert "[CFG001]" in capsys.readouterr().err


def test_list_rules_prints_catalog(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list-rules"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == [
        "max-parameters",
        "no-bare-element-selector",
        "forbidden-property",
    ]
