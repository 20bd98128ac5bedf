"""File content collection for the generated document.

This module walks a directory depth-first, applies the ignore and include rules,
and produces one FileRecord per admitted file: either its text or the reason it
could not be included.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from lingest.file_system_tree.listing import DirectoryEntry, child_path, sorted_entries
from lingest.path_filter import PathFilter
from lingest.types import EntryKind, PathType

UNREADABLE_REASON = "Could not be read as UTF-8 text. Might be binary or encoding issue."


def dry_run_placeholder(relative_path: str) -> str:
    """Content stand-in used for files in a dry run.

    Example:
        >>> dry_run_placeholder("src/main.py")
        '[Dry Run] Content of src/main.py would be here.'
    """
    return f"[Dry Run] Content of {relative_path} would be here."


@dataclass(frozen=True)
class FileRecord:
    """One admitted file as it appears in the document.

    Exactly one of ``content`` and ``error_reason`` is set. Records with an error
    reason keep the document's coverage complete but do not count as processed.

    Attributes:
        relative_path: Forward-slash path relative to the processed root.
        content: Decoded file text, or the placeholder in a dry run.
        error_reason: Why the content could not be included.

    Example:
        >>> FileRecord("a.txt", content="hello").is_processed
        True
        >>> FileRecord("b/c.bin", error_reason=UNREADABLE_REASON).is_processed
        False
    """

    relative_path: str
    content: Optional[str] = None
    error_reason: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.error_reason is None):
            raise ValueError(f"FileRecord for {self.relative_path} needs exactly one of content or error_reason")

    @property
    def is_processed(self) -> bool:
        """Whether the file's content made it into the record."""
        return self.content is not None


class ContentCollector:
    """Collects the content of every file admitted by a PathFilter.

    Traversal is depth-first in the same child order as the rendered tree:
    directories before files, then case-sensitive name order, at every level. The
    pending entries are kept on an explicit stack rather than the call stack.

    Per entry:
        - the output document is skipped;
        - ignored entries are skipped, and ignored directories are not descended;
        - directories are descended;
        - files rejected by include patterns are skipped;
        - every other regular file becomes a FileRecord.

    Failures never abort the walk. An unreadable directory is skipped with a
    warning. A file that cannot be read or decoded as UTF-8 becomes a record with
    an error reason.

    Attributes:
        root_path (Path): Directory to collect from.
        path_filter (PathFilter): Rules deciding which files are collected.

    Example:
        >>> collector = ContentCollector("project", PathFilter())  # doctest: +SKIP
        >>> records, processed_count = collector.collect()  # doctest: +SKIP
        >>> [record.relative_path for record in records]  # doctest: +SKIP
        ['src/utils/helpers.py', 'src/main.py', 'README.md']
    """

    def __init__(self, root_path: PathType, path_filter: PathFilter, logger: Optional[logging.Logger] = None):
        """Initialize a ContentCollector.

        Args:
            root_path: Directory to collect from.
            path_filter: Rules deciding which files are collected.
            logger: Destination for diagnostics. Defaults to this module's logger.
        """
        self.root_path = Path(root_path)
        self.path_filter = path_filter
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def collect(self, dry_run: bool = False) -> Tuple[Tuple[FileRecord, ...], int]:
        """Walk the root and build the file records.

        Args:
            dry_run: If True, file contents are not read; each record holds a
                placeholder and counts as processed.

        Returns:
            The records in traversal order and the number of records with content.
        """
        records: List[FileRecord] = []
        processed_count = 0
        pending: List[Tuple[DirectoryEntry, str]] = [
            (DirectoryEntry(self.root_path.name, str(self.root_path), EntryKind.DIRECTORY), "")
        ]

        while pending:
            entry, relative_path = pending.pop()

            if entry.kind is EntryKind.DIRECTORY:
                # Reversed so the first child is popped next
                pending.extend(reversed(self._admitted_children(entry.path, relative_path)))
                continue

            if dry_run:
                self.logger.info("[Dry Run] Would process file for content: %s", relative_path)
                record = FileRecord(relative_path, content=dry_run_placeholder(relative_path))
            else:
                record = self._read_record(entry.path, relative_path)

            records.append(record)
            if record.is_processed:
                processed_count += 1

        return tuple(records), processed_count

    def _admitted_children(self, directory: str, relative_path: str) -> List[Tuple[DirectoryEntry, str]]:
        """List the children of a directory that survive the filter rules."""
        try:
            entries = sorted_entries(directory)
        except OSError as e:
            self.logger.warning("Could not read directory %s: %s. Skipping.", directory, e)
            return []

        admitted = []
        for entry in entries:
            entry_path = child_path(relative_path, entry.name)

            if self.path_filter.is_output(entry.path):
                continue

            if entry.kind is EntryKind.OTHER:
                self.logger.debug("[Content] Skipping special file or symlink: %s", entry_path)
                continue

            is_dir = entry.kind is EntryKind.DIRECTORY
            if self.path_filter.is_ignored(entry_path, is_dir=is_dir):
                self.logger.debug("[Content] Ignoring (due to ignore pattern): %s", entry_path)
                continue

            if not is_dir and not self.path_filter.is_included(entry_path):
                self.logger.debug("[Content] Skipping (not in include patterns): %s", entry_path)
                continue

            admitted.append((entry, entry_path))
        return admitted

    def _read_record(self, path: str, relative_path: str) -> FileRecord:
        """Read and strictly decode one file."""
        try:
            with open(path, "rb") as f:
                content = f.read().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning("[Content] Skipping file %s. Could not read as UTF-8 text (%s).", relative_path, e)
            return FileRecord(relative_path, error_reason=UNREADABLE_REASON)

        self.logger.debug("[Content] Processed file: %s", relative_path)
        return FileRecord(relative_path, content=content)
