"""Configuration for a single tree-generation call."""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


def _ordered_set(patterns: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(patterns))


@dataclass(frozen=True)
class TreeOptions:
    """Immutable set of options applied to one tree-generation call.

    Options are built once per invocation with explicit defaults and are read-only for
    the duration of the traversal. Pattern sequences are stored as tuples with
    duplicates removed, keeping the order in which patterns were first given.

    Attributes:
        max_depth: Maximum traversal depth. None means unlimited; 0 renders only the
            root line.
        show_hidden: Whether entries whose name starts with "." are shown.
        show_size: Whether file lines carry a human-readable size.
        show_date: Whether file lines carry the modification date (YYYY-MM-DD, UTC).
        exclude_patterns: Entries matching any of these patterns are dropped.
        include_patterns: If non-empty, entries must match at least one of these.
        sort: Whether siblings are ordered directories first, then by name.

    Example:
        >>> options = TreeOptions(max_depth=2, exclude_patterns=["*.log", "*.log"])
        >>> options.exclude_patterns
        ('*.log',)
        >>> TreeOptions(max_depth=-1)
        Traceback (most recent call last):
            ...
        ValueError: max_depth must be a non-negative integer or None, got -1
    """

    max_depth: Optional[int] = None
    show_hidden: bool = False
    show_size: bool = False
    show_date: bool = False
    exclude_patterns: Tuple[str, ...] = ()
    include_patterns: Tuple[str, ...] = ()
    sort: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 0:
                raise ValueError(f"max_depth must be a non-negative integer or None, got {self.max_depth!r}")

        for field_name in ("exclude_patterns", "include_patterns"):
            patterns = getattr(self, field_name)
            if isinstance(patterns, str):
                raise TypeError(f"{field_name} must be a sequence of strings, not a single string")
            object.__setattr__(self, field_name, _ordered_set(patterns))
