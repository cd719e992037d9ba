"""Shared pytest fixtures for Guidecheck tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from guidecheck.rules import RuleSet, build_builtin_rules


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes ``content`` to ``tmp_path / name``."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def builtin_rules() -> RuleSet:
    """Return the built-in catalog with default options."""
    return build_builtin_rules()
