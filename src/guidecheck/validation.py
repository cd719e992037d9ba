"""Preflight validation orchestrator.

Combines the root-directory check and config-file validation into a single
entry point that both ``guidecheck validate-config`` and ``guidecheck check``
share, keeping the two paths in sync.
"""

from __future__ import annotations

from pathlib import Path

from guidecheck.config import validate_config_file
from guidecheck.constants.validation import CFG009
from guidecheck.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG009,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    return sort_errors(validate_config_file(root, config_path, config_explicit=config_path is not None))
