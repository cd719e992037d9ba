"""Location, violation, and result records."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from guidecheck.types import JsonObject


@dataclass(frozen=True)
class Location:
    """Where in a source file a fact was observed."""

    path: str
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """Render as ``path[:line[:column]]``."""
        text = self.path
        if self.line is not None:
            text = f"{text}:{self.line}"
            if self.column is not None:
                text = f"{text}:{self.column}"
        return text

    def to_dict(self) -> JsonObject:
        return {"path": self.path, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class Violation:
    """A fact that failed one rule's predicate."""

    rule_id: str
    message: str
    location: Location | None = None

    def to_dict(self) -> JsonObject:
        """Serialize violation for JSON output."""
        return {
            "rule_id": self.rule_id,
            "message": self.message,
            "location": self.location.to_dict() if self.location is not None else None,
        }


@dataclass(frozen=True)
class LintResult:
    """Outcome of one check run over a set of fact files."""

    violations: tuple[Violation, ...]
    files_checked: int
    facts_checked: int
    executed_rule_ids: tuple[str, ...]
    disabled_rule_ids: tuple[str, ...] = ()

    @property
    def total_violations(self) -> int:
        return len(self.violations)

    @property
    def counts_by_rule(self) -> dict[str, int]:
        """Violation counts keyed by rule id, in executed-rule order."""
        counts = Counter(violation.rule_id for violation in self.violations)
        return {rule_id: counts[rule_id] for rule_id in self.executed_rule_ids if counts[rule_id]}

    @property
    def files_with_violations(self) -> int:
        return len(
            {violation.location.path for violation in self.violations if violation.location is not None}
        )
