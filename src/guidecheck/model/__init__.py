"""Core data models for Guidecheck."""

from .entities import LintResult, Location, Violation
from .facts import DeclarationFact, Fact, OpaqueFact, ParameterListFact, SelectorFact

__all__ = [
    "DeclarationFact",
    "Fact",
    "LintResult",
    "Location",
    "OpaqueFact",
    "ParameterListFact",
    "SelectorFact",
    "Violation",
]
