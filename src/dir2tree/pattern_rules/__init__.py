"""Pattern rules for including and excluding traversal entries."""

from .base_rules import BasePatternRules
from .wildcard_rules import WildcardPatternRules, compile_pattern, matches_pattern

__all__ = [
    "BasePatternRules",
    "WildcardPatternRules",
    "compile_pattern",
    "matches_pattern",
]
