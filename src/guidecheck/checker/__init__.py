"""Check orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["build_rule_set", "check_files"]


def __getattr__(name: str) -> Any:
    """Lazily expose checker APIs to avoid import cycles at package import time."""
    if name in __all__:
        from . import orchestrator

        return getattr(orchestrator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
