from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry kinds encountered during traversal.

    Symbolic links are followed when entries are stat'd, so a link is reported as
    the kind of its target.

    Attributes:
        FILE: Anything that is not a directory
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
