"""Directory tree rendering utilities.

This package renders directory hierarchies as indented ASCII trees, with support for
include/exclude patterns, hidden entries, depth limits, directory-first sorting and
per-file size and date metadata.
"""

from importlib.metadata import PackageNotFoundError, version

from dir2tree.exceptions import PathNotFoundError
from dir2tree.file_system_tree.directory_entry import DirectoryEntry
from dir2tree.file_system_tree.tree_builder import TreeBuilder, generate
from dir2tree.options import TreeOptions
from dir2tree.types import FileType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DirectoryEntry",
    "FileType",
    "PathNotFoundError",
    "TreeBuilder",
    "TreeOptions",
    "generate",
]
