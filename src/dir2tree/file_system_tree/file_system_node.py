"""Node representation for file system elements in the tree."""

from datetime import datetime
from typing import Any, Optional

from anytree import Node

from dir2tree.file_system_tree.directory_entry import DirectoryEntry


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the rendered tree.

    Extends anytree.Node with the metadata needed to render a line: whether the node
    is a directory, its path, and for files the size and modification time. Children
    only ever hold entries that survived filtering and could be stat'd, in display
    order.

    Attributes:
        name (str): The base name of the file or directory.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        fs_path (str): Path of the entry on disk. Named so it does not shadow
            anytree's own ``path`` (the tuple of ancestor nodes).
        file_size (Optional[int]): Size in bytes for files, None for directories.
            anytree reserves ``size`` for the subtree node count.
        modified_time (Optional[datetime]): Last modification time (UTC).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root, file_size=12)
        >>> [node.name for node in root.children]
        ['file.txt']
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        fs_path: str = "",
        file_size: Optional[int] = None,
        modified_time: Optional[datetime] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.fs_path = fs_path
        self.file_size = file_size
        self.modified_time = modified_time

    @classmethod
    def from_entry(cls, entry: DirectoryEntry, parent: Optional["FileSystemNode"] = None) -> "FileSystemNode":
        """Create a node carrying the metadata of a DirectoryEntry."""
        return cls(
            entry.name,
            parent=parent,
            is_dir=entry.is_dir,
            fs_path=entry.path,
            file_size=entry.size,
            modified_time=entry.modified_time,
        )
