"""Directory tree construction and rendering with configurable filtering.

This module provides the TreeBuilder class, which lists a directory hierarchy
depth-first, filters and sorts every sibling group, and renders the result as an
indented tree using box-drawing connectors.
"""

import locale
import logging
import os
import stat
from datetime import datetime, timezone
from typing import Any, Iterator, List, NamedTuple, Optional

from dir2tree.exceptions import PathNotFoundError
from dir2tree.file_system_tree.directory_entry import DirectoryEntry
from dir2tree.file_system_tree.file_system_node import FileSystemNode
from dir2tree.formatting import format_date, format_size
from dir2tree.options import TreeOptions
from dir2tree.pattern_rules.wildcard_rules import WildcardPatternRules
from dir2tree.types import FileType, PathType

logger = logging.getLogger(__name__)

CONNECTOR = "├── "
LAST_CONNECTOR = "└── "
CONTINUATION = "│   "
LAST_CONTINUATION = "    "


class _Candidate(NamedTuple):
    """A listed name that survived filtering but has not been stat'd yet."""

    name: str
    path: str
    relative_path: str
    is_dir: bool


class TreeBuilder:
    """Builds and renders directory trees according to a set of TreeOptions.

    Traversal is depth-first and pre-order. For every directory the builder lists the
    raw names, filters them (hidden names first, then exclude patterns, then include
    patterns), sorts the survivors and stats each one. Patterns are matched against
    the path relative to the traversal root; directories carry a trailing "/" so that
    a pattern like "*/" selects directories only.

    Error Handling:
        Only a missing root path is fatal and raises PathNotFoundError. An entry that
        cannot be stat'd is left out of the tree, and a directory that cannot be
        listed is shown without children. Neither aborts the traversal of its
        siblings.

    The builder keeps no state between calls, so one instance can serve any number
    of build_tree or list_entries calls, including from different threads.

    Attributes:
        options (TreeOptions): The configuration applied to every call.
        exclusion_rules (WildcardPatternRules): Compiled exclude patterns.
        inclusion_rules (WildcardPatternRules): Compiled include patterns.

    Example:
        >>> builder = TreeBuilder(TreeOptions(max_depth=1))  # doctest: +SKIP
        >>> print(builder.build_tree("project"), end="")  # doctest: +SKIP
        └── project/
            ├── src/
            └── README.md
    """

    def __init__(self, options: Optional[TreeOptions] = None) -> None:
        self.options = options if options is not None else TreeOptions()
        self.exclusion_rules = WildcardPatternRules(self.options.exclude_patterns)
        self.inclusion_rules = WildcardPatternRules(self.options.include_patterns)

    def get_tree(self, root_path: PathType) -> FileSystemNode:
        """Build the node tree rooted at root_path.

        Args:
            root_path: Path to a directory or file. Can be any path-like object.

        Returns:
            The root node. Its children are the filtered, sorted entries that could be
            stat'd, down to the configured maximum depth.

        Raises:
            PathNotFoundError: If root_path does not exist.
        """
        path = os.path.abspath(os.fspath(root_path))
        root_entry = self._stat_entry(os.path.basename(path), path)
        if root_entry is None:
            raise PathNotFoundError(os.fspath(root_path))

        root = FileSystemNode.from_entry(root_entry)
        if root.is_dir:
            self._populate(root, "", 0)
        return root

    def _populate(self, node: FileSystemNode, relative_path: str, depth: int) -> None:
        """Recursively attach the children of a directory node."""
        if self.options.max_depth is not None and depth >= self.options.max_depth:
            return

        for candidate in self._select_candidates(node.fs_path, relative_path):
            entry = self._stat_entry(candidate.name, candidate.path)
            if entry is None:
                continue
            child = FileSystemNode.from_entry(entry, parent=node)
            if child.is_dir:
                self._populate(child, candidate.relative_path, depth + 1)

    def _select_candidates(self, dir_path: str, relative_path: str) -> List[_Candidate]:
        """List a directory, then filter and sort its entries.

        Args:
            dir_path: Path of the directory on disk.
            relative_path: Path of the directory relative to the traversal root ("" for
                the root itself).

        Returns:
            The surviving candidates in display order. An unreadable directory yields
            an empty list.
        """
        try:
            with os.scandir(dir_path) as iterator:
                dir_entries = sorted(iterator, key=lambda dir_entry: dir_entry.name)
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", dir_path, e)
            return []

        candidates = []
        for dir_entry in dir_entries:
            name = dir_entry.name
            if not self.options.show_hidden and name.startswith("."):
                continue

            is_dir = self._is_dir(dir_entry)
            child_relative_path = os.path.join(relative_path, name) if relative_path else name
            match_path = child_relative_path + "/" if is_dir else child_relative_path

            if self.exclusion_rules.matches(match_path):
                continue
            if self.inclusion_rules.has_rules() and not self.inclusion_rules.matches(match_path):
                continue

            candidates.append(_Candidate(name, dir_entry.path, child_relative_path, is_dir))

        if self.options.sort:
            # Directories first, then names; the raw name breaks ties between equal collation keys
            candidates.sort(key=lambda c: (not c.is_dir, locale.strxfrm(c.name), c.name))

        return candidates

    @staticmethod
    def _is_dir(dir_entry: "os.DirEntry[str]") -> bool:
        """Return whether a listed entry is a directory, following symlinks.

        Entries whose type cannot be determined count as files.
        """
        try:
            return dir_entry.is_dir()
        except OSError:
            return False

    @staticmethod
    def _stat_entry(name: str, path: str) -> Optional[DirectoryEntry]:
        """Stat a path and describe it, or return None if it cannot be stat'd."""
        try:
            stat_info = os.stat(path)
        except OSError as e:
            logger.debug("Skipping %s: %s", path, e)
            return None

        is_dir = stat.S_ISDIR(stat_info.st_mode)
        return DirectoryEntry(
            name=name,
            path=path,
            file_type=FileType.DIRECTORY if is_dir else FileType.FILE,
            size=None if is_dir else stat_info.st_size,
            modified_time=datetime.fromtimestamp(stat_info.st_mtime, tz=timezone.utc),
        )

    def list_entries(self, path: PathType) -> List[DirectoryEntry]:
        """List the immediate entries of a directory as structured data.

        The same hidden, exclude, include and sort rules as build_tree apply, with
        patterns matched relative to path. Entries that cannot be stat'd are left out.

        Args:
            path: Directory to list. Can be any path-like object.

        Returns:
            The entries in display order. An empty list if path is not a directory or
            cannot be read.

        Raises:
            PathNotFoundError: If path does not exist.

        Example:
            >>> entries = TreeBuilder().list_entries("project")  # doctest: +SKIP
            >>> [(entry.name, entry.is_dir) for entry in entries]  # doctest: +SKIP
            [('src', True), ('README.md', False)]
        """
        dir_path = os.path.abspath(os.fspath(path))
        if not os.path.exists(dir_path):
            raise PathNotFoundError(os.fspath(path))

        entries = []
        for candidate in self._select_candidates(dir_path, ""):
            entry = self._stat_entry(candidate.name, candidate.path)
            if entry is not None:
                entries.append(entry)
        return entries

    def stream_tree_representation(self, root_path: PathType) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The whole node tree is built before the first line is yielded, so a missing
        root raises before any output is produced.

        Yields:
            Rendered lines without trailing newlines.

        Raises:
            PathNotFoundError: If root_path does not exist.
        """
        root = self.get_tree(root_path)
        yield from self._render(root, "", True)

    def _render(self, node: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
        connector = LAST_CONNECTOR if is_last else CONNECTOR
        if node.is_dir:
            yield f"{prefix}{connector}{node.name}/"
        else:
            yield f"{prefix}{connector}{node.name}{self._format_details(node)}"

        child_prefix = prefix + (LAST_CONTINUATION if is_last else CONTINUATION)
        children = node.children
        for i, child in enumerate(children):
            yield from self._render(child, child_prefix, i == len(children) - 1)

    def _format_details(self, node: FileSystemNode) -> str:
        details = []
        if self.options.show_size and node.file_size is not None:
            details.append(format_size(node.file_size))
        if self.options.show_date and node.modified_time is not None:
            details.append(format_date(node.modified_time))
        return f" [{', '.join(details)}]" if details else ""

    def build_tree(self, root_path: PathType) -> str:
        """Get the complete tree representation as a string.

        Every line, including the last, ends with a newline.

        Raises:
            PathNotFoundError: If root_path does not exist.

        Example:
            >>> print(TreeBuilder().build_tree("root"), end="")  # doctest: +SKIP
            └── root/
                ├── sub/
                │   └── b.txt
                └── a.txt
        """
        return "".join(f"{line}\n" for line in self.stream_tree_representation(root_path))


def generate(root_path: PathType, options: Optional[TreeOptions] = None, **kwargs: Any) -> str:
    """Render the tree rooted at root_path in one call.

    Options can be passed as a TreeOptions instance or as TreeOptions keyword
    arguments, but not both.

    Raises:
        PathNotFoundError: If root_path does not exist.
        TypeError: If both options and keyword arguments are given.

    Example:
        >>> print(generate("root", max_depth=0), end="")  # doctest: +SKIP
        └── root/
    """
    if options is not None and kwargs:
        raise TypeError("Pass either a TreeOptions instance or keyword options, not both")
    if options is None:
        options = TreeOptions(**kwargs)
    return TreeBuilder(options).build_tree(root_path)
