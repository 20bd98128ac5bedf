"""Directory listing with the child-ordering rule shared by all traversals."""

import os
from dataclasses import dataclass
from typing import List

from lingest.types import EntryKind, PathType


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory.

    Attributes:
        name: Entry name (basename) as text. Bytes that are not valid UTF-8 are
            shown as U+FFFD.
        path: Full path of the entry as returned by the OS, usable for opening it.
        kind: Whether the entry is a regular file, a directory or something else.
    """

    name: str
    path: str
    kind: EntryKind


def child_path(parent_relative_path: str, name: str) -> str:
    """Join a root-relative parent path and a child name with a forward slash.

    Example:
        >>> child_path("", "src")
        'src'
        >>> child_path("src", "main.py")
        'src/main.py'
    """
    return f"{parent_relative_path}/{name}" if parent_relative_path else name


def display_name(name: str) -> str:
    """Turn an OS file name into text that can always be written as UTF-8.

    Undecodable bytes arrive from the OS as surrogate escapes; they are replaced
    with U+FFFD.

    Example:
        >>> display_name("bad\\udcffname.txt") == "bad\\ufffdname.txt"
        True
    """
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _entry_kind(entry: "os.DirEntry[str]") -> EntryKind:
    # Symlinks are never followed: a link to a directory is neither a file nor a directory here
    try:
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        # Entry vanished or cannot be stat-ed; treat it like any other unsupported kind
        return EntryKind.OTHER
    return EntryKind.OTHER


def sorted_entries(directory: PathType) -> List[DirectoryEntry]:
    """List a directory's children in traversal order.

    Directories come before everything else; within each group entries are sorted
    by case-sensitive name. The tree and the content walk both use this ordering
    so the two views of a directory always agree.

    Args:
        directory: Directory to list.

    Returns:
        The sorted children.

    Raises:
        OSError: If the directory cannot be listed (permissions, removed while
            traversing, not a directory).
    """
    with os.scandir(directory) as it:
        entries = [DirectoryEntry(display_name(entry.name), entry.path, _entry_kind(entry)) for entry in it]

    entries.sort(key=lambda e: (e.kind is not EntryKind.DIRECTORY, e.name))
    return entries
