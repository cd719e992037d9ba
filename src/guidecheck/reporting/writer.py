"""JSON report payload and atomic report file writer."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from guidecheck.constants.reporting import REPORT_TEMP_PREFIX, REPORT_TEMP_SUFFIX, SCHEMA_VERSION
from guidecheck.model import LintResult
from guidecheck.types import JsonObject


def build_report_payload(result: LintResult) -> JsonObject:
    """Build the stable JSON report for a check run.

    Violations keep evaluation order so reports diff cleanly between runs.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "summary": {
            "files_checked": result.files_checked,
            "facts_checked": result.facts_checked,
            "total_violations": result.total_violations,
            "counts_by_rule": dict(result.counts_by_rule),
            "rules_executed": list(result.executed_rule_ids),
            "rules_disabled": list(result.disabled_rule_ids),
        },
        "violations": [violation.to_dict() for violation in result.violations],
    }


def render_json_report(result: LintResult) -> str:
    return json.dumps(build_report_payload(result), indent=2, sort_keys=True)


def write_report(path: Path, result: LintResult) -> None:
    """Write the JSON report to ``path`` atomically.

    The report is rendered in full before the temp file beside ``path`` is
    created, then renamed over ``path``. A failed write removes the temp file.
    """
    text = render_json_report(result) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=REPORT_TEMP_PREFIX,
            suffix=REPORT_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(text)
        temp_path.replace(path)
    except OSError:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise
