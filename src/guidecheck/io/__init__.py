"""Fact file reading."""

from .facts import load_facts, parse_facts

__all__ = ["load_facts", "parse_facts"]
