"""Configuration-related exceptions."""

from __future__ import annotations

from guidecheck.exceptions.base import GuidecheckError


class ConfigurationError(GuidecheckError, ValueError):
    """Raised when a rule set or its configuration is invalid."""
