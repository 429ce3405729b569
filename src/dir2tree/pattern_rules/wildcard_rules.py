"""Wildcard-or-substring pattern rules."""

import re
from typing import Dict, Iterable, Optional, Pattern, Tuple

from .base_rules import BasePatternRules


def compile_pattern(pattern: str) -> Optional[Pattern[str]]:
    """Compile a wildcard pattern into an anchored regular expression.

    Each "*" becomes a match-any-sequence wildcard and every other character is taken
    literally. The expression must match the whole path. Patterns without "*" are
    plain substring rules and compile to None.

    Example:
        >>> compile_pattern("*.txt").fullmatch("notes/a.txt") is not None
        True
        >>> compile_pattern("*.txt").fullmatch("a.txt.bak") is None
        True
        >>> compile_pattern("node_modules") is None
        True
    """
    if "*" not in pattern:
        return None
    return re.compile(".*".join(re.escape(part) for part in pattern.split("*")), re.DOTALL)


def matches_pattern(path: str, pattern: str) -> bool:
    """Check whether a path matches a single pattern.

    Patterns containing "*" must match the full path, with "*" standing for any
    sequence of characters. Patterns without "*" match when they occur anywhere in the
    path. Matching is case-sensitive. Brace expansion such as "*.{js,ts}" is not
    supported: the braces are matched literally.

    Args:
        path: Path relative to the traversal root, e.g. "src/main.py" or "src/".
        pattern: Wildcard or substring pattern.

    Returns:
        True if the path matches the pattern.

    Example:
        >>> matches_pattern("src/main.py", "*.py")
        True
        >>> matches_pattern("src/main.py", "main")
        True
        >>> matches_pattern("src/main.py", "src")
        True
        >>> matches_pattern("src/main.py", "*.{py,txt}")
        False
    """
    regex = compile_pattern(pattern)
    if regex is None:
        return pattern in path
    return regex.fullmatch(path) is not None


class WildcardPatternRules(BasePatternRules):
    """Ordered set of wildcard-or-substring patterns.

    A path matches the rule set when it matches ANY of the patterns (see
    matches_pattern). Duplicate patterns are ignored and the first-seen order is
    kept. Wildcard patterns are compiled once, when they are added.

    Attributes:
        patterns (Tuple[str, ...]): The configured patterns in insertion order.

    Example:
        >>> rules = WildcardPatternRules(["node_modules", "*.log"])
        >>> rules.matches("web/node_modules/")
        True
        >>> rules.matches("server.log")
        True
        >>> rules.matches("src/server.py")
        False
        >>> WildcardPatternRules().has_rules()
        False
    """

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._compiled: Dict[str, Optional[Pattern[str]]] = {}
        for pattern in patterns:
            self.add_rule(pattern)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._compiled)

    def add_rule(self, rule: str) -> None:
        """Add a single pattern. Adding a pattern that is already present has no effect."""
        if rule not in self._compiled:
            self._compiled[rule] = compile_pattern(rule)

    def matches(self, path: str) -> bool:
        for pattern, regex in self._compiled.items():
            if regex is None:
                if pattern in path:
                    return True
            elif regex.fullmatch(path) is not None:
                return True
        return False

    def has_rules(self) -> bool:
        return bool(self._compiled)

    def __repr__(self) -> str:
        return f"WildcardPatternRules({list(self._compiled)!r})"
