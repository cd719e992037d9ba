"""Shared exception hierarchy for Guidecheck."""

from __future__ import annotations

from .base import GuidecheckError
from .config import ConfigurationError
from .facts import FactFileError

__all__ = ["ConfigurationError", "FactFileError", "GuidecheckError"]
