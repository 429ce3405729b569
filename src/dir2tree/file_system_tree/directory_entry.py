"""Structured description of a single entry found during traversal."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from dir2tree.types import FileType


@dataclass(frozen=True)
class DirectoryEntry:
    """A file or directory found while listing a directory.

    Entries are produced fresh on every traversal and are never cached between calls.

    Attributes:
        name: The base name of the entry.
        path: The parent path joined with the name.
        file_type: Whether the entry is a file or a directory.
        size: Size in bytes for files, None for directories.
        modified_time: Last modification time as a UTC datetime.
    """

    name: str
    path: str
    file_type: FileType
    size: Optional[int] = None
    modified_time: Optional[datetime] = None

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY
