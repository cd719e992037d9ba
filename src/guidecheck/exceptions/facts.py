"""Fact-file exceptions."""

from __future__ import annotations

from guidecheck.exceptions.base import GuidecheckError


class FactFileError(GuidecheckError, ValueError):
    """Raised when a fact file cannot be read or has the wrong shape."""
