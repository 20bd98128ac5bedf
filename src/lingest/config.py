"""Run configuration for lingest."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Tuple

from lingest.types import PathType

DEFAULT_OUTPUT_FILENAME = "lingest_output.md"


def split_patterns(values: Iterable[str]) -> Tuple[str, ...]:
    """Split comma-separated pattern lists into individual patterns.

    Whitespace around each pattern is stripped and empty entries are dropped.

    Args:
        values: Strings that may each hold several comma-separated patterns.

    Returns:
        The patterns in the order they were given.

    Example:
        >>> split_patterns(["*.md, docs/**", "", " *.txt"])
        ('*.md', 'docs/**', '*.txt')
    """
    patterns = []
    for value in values:
        patterns.extend(part.strip() for part in value.split(","))
    return tuple(pattern for pattern in patterns if pattern)


@dataclass(frozen=True)
class Configuration:
    """Immutable settings for a single lingest run.

    Attributes:
        root: Directory to process. All paths in the output are relative to it.
        output_path: Destination of the generated document. A relative path is
            resolved against the current working directory.
        ignore_patterns: User-supplied glob patterns to exclude. The built-in
            baseline and the output file name are always added on top of these.
        include_patterns: Glob patterns restricting which files are included.
            An empty tuple admits every file that is not ignored.
        include_tree: Whether to render the directory tree section.
        dry_run: Compute what would be processed without reading file contents
            or writing the document.
        force: Overwrite an existing output file.
        quiet: Suppress informational log messages. Warnings and errors are
            still reported.

    Example:
        >>> config = Configuration(".", ignore_patterns=["*.log"])
        >>> config.ignore_patterns
        ('*.log',)
        >>> config.output_file.name
        'lingest_output.md'
    """

    root: PathType = "."
    output_path: PathType = DEFAULT_OUTPUT_FILENAME
    ignore_patterns: Tuple[str, ...] = field(default_factory=tuple)
    include_patterns: Tuple[str, ...] = field(default_factory=tuple)
    include_tree: bool = True
    dry_run: bool = False
    force: bool = False
    quiet: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of patterns but store tuples so the value stays immutable
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))
        object.__setattr__(self, "include_patterns", tuple(self.include_patterns))

    @property
    def root_path(self) -> Path:
        """Absolute path of the directory being processed."""
        return Path(os.path.abspath(self.root))

    @property
    def output_file(self) -> Path:
        """Absolute path of the output document."""
        return Path(os.path.abspath(self.output_path))
