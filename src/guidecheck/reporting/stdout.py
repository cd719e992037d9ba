"""Human-readable stdout reporter for check results."""

from __future__ import annotations

from guidecheck.constants.branding import ASCII_LOGO_LINES, CHECK_SUMMARY_TITLE
from guidecheck.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET
from guidecheck.model import LintResult, Violation


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class StdoutReporter:
    """Formats check results as ``path:line:col  rule  message`` lines plus a summary."""

    def __init__(self, result: LintResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_violations(), self._render_summary()]
        return "\n".join(section for section in sections if section)

    def _render_violations(self) -> str:
        return "\n".join(self._render_violation(violation) for violation in self._result.violations)

    def _render_violation(self, violation: Violation) -> str:
        location = violation.location.format() if violation.location is not None else "<unknown>"
        rule_id = _colorize(violation.rule_id, ANSI_BOLD) if self._color else violation.rule_id
        return f"{location}  {rule_id}  {violation.message}"

    def _render_summary(self) -> str:
        r = self._result
        total = r.total_violations
        if total:
            verdict = f"{_plural(total, 'violation')} in {_plural(r.files_with_violations, 'file')}"
            verdict = _colorize(verdict, ANSI_RED) if self._color else verdict
        else:
            verdict = _colorize("No violations", ANSI_GREEN) if self._color else "No violations"

        lines = [f"{verdict} ({_plural(r.files_checked, 'file')} checked)"]
        if not self._verbose:
            return "\n".join(lines)

        sep = "  " + "─" * 38
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {CHECK_SUMMARY_TITLE}",
            sep,
            f"  Verdict     {verdict}",
            f"  Files       {r.files_checked} checked / {r.files_with_violations} with violations",
            f"  Facts       {r.facts_checked}",
            f"  By rule     {self._format_counts(r.counts_by_rule)}",
            f"  Rules run   {len(r.executed_rule_ids)} ({', '.join(r.executed_rule_ids) or 'none'})",
        ]
        if r.disabled_rule_ids:
            off = ", ".join(r.disabled_rule_ids)
            lines.append(f"  Rules off   {len(r.disabled_rule_ids)} ({_colorize(off, ANSI_DIM) if self._color else off})")
        return "\n".join(lines)

    @staticmethod
    def _format_counts(counts: dict[str, int]) -> str:
        """Render rule counts sorted by descending count, then rule id."""
        if not counts:
            return "none"
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return " · ".join(f"{rule_id} {count}" for rule_id, count in ranked)
