from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Kind of a filesystem entry as seen during traversal.

    Symbolic links are never followed, so a link to a directory is reported as
    OTHER rather than DIRECTORY.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        OTHER: Symlink, socket, fifo or anything else that is skipped
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
