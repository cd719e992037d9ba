"""Root exception for Guidecheck."""

from __future__ import annotations


class GuidecheckError(Exception):
    """Base class for all errors raised by Guidecheck."""
