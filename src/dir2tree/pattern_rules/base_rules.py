from abc import ABC, abstractmethod


class BasePatternRules(ABC):
    """
    Abstract base class defining the interface for path pattern rules.

    Pattern rules decide whether a traversal-relative path matches a set of configured
    patterns. The tree builder holds one rule set for exclusion and one for inclusion
    and asks each of them about every candidate entry. Directory paths are passed with
    a trailing "/" so that rules can tell directories from files.

    Example:
        >>> from dir2tree.pattern_rules.wildcard_rules import WildcardPatternRules
        >>> rules = WildcardPatternRules(["*.pyc"])
        >>> rules.matches("pkg/module.pyc")
        True
        >>> rules.matches("pkg/module.py")
        False
    """

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine if a given path matches any of the configured rules.

        Args:
            path (str): The path to check, relative to the traversal root. Directory
                paths end with "/".

        Returns:
            bool: True if at least one rule matches the path.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether any rules are configured.

        An empty include rule set keeps everything, so callers use this to tell "no
        include rules" apart from "nothing matched".
        """
        pass

    @abstractmethod
    def add_rule(self, rule: str) -> None:
        """
        Add a single rule directly.

        Args:
            rule (str): The rule to add. The format depends on the implementation.
        """
        pass
