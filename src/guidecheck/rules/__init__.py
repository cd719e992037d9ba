"""Rule definitions, the rule set container, and the built-in catalog."""

from .base import Rule
from .builtin import build_builtin_rules, builtin_rule_descriptions
from .registry import RuleSet

__all__ = ["Rule", "RuleSet", "build_builtin_rules", "builtin_rule_descriptions"]
