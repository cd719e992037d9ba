"""Shared type aliases for Guidecheck."""

from .common import JsonObject, JsonScalar, JsonValue, RuleOptions

__all__ = ["JsonObject", "JsonScalar", "JsonValue", "RuleOptions"]
