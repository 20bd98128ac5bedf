"""Ignore and include decisions for paths relative to the processed root."""

import os
from typing import Iterable, Optional

from lingest.config import Configuration
from lingest.exclusion_rules.base_rules import BaseExclusionRules
from lingest.exclusion_rules.composite_rules import CompositeExclusionRules
from lingest.exclusion_rules.defaults import DEFAULT_IGNORE_PATTERNS
from lingest.exclusion_rules.glob_rules import GlobExclusionRules
from lingest.file_system_tree.listing import display_name
from lingest.types import PathType


class PathFilter:
    """Decides which root-relative paths are ignored and which files are included.

    The ignore set is the union of the built-in baseline (DEFAULT_IGNORE_PATTERNS)
    and the user-supplied ignore patterns. On top of that, any entry carrying the
    output file's name is ignored at every depth, so a previous document is never
    ingested into the next one. The name is compared literally, so glob
    characters in it have no special meaning. Ignore always wins over include.

    Include patterns only ever restrict files. Directories are descended into
    whenever they are not ignored.

    Attributes:
        ignore_rules (BaseExclusionRules): Combined ignore rules.
        include_rules (GlobExclusionRules): Include patterns; empty means "include all".
        output_path (Optional[str]): Absolute path of the output document, if any.
        output_name (Optional[str]): File name of the output document, if any.

    Example:
        >>> path_filter = PathFilter(include_patterns=["*.md"], output_path="/work/out.md")
        >>> path_filter.is_ignored("node_modules", is_dir=True)
        True
        >>> path_filter.is_ignored("docs/out.md")
        True
        >>> path_filter.is_included("docs/readme.md")
        True
        >>> path_filter.is_included("notes.txt")
        False
    """

    def __init__(
        self,
        ignore_patterns: Iterable[str] = (),
        include_patterns: Iterable[str] = (),
        output_path: Optional[PathType] = None,
    ) -> None:
        """Build the merged ignore set and the include set.

        Args:
            ignore_patterns: User-supplied ignore patterns.
            include_patterns: Include patterns. Empty admits every file.
            output_path: Path of the output document. It is excluded by its
                absolute path and, anywhere in the tree, by its file name.

        Raises:
            InvalidPatternError: If any pattern is negated or malformed.
        """
        self.output_path = os.path.abspath(output_path) if output_path is not None else None
        self.output_name = display_name(os.path.basename(self.output_path)) if self.output_path is not None else None

        self.ignore_rules: BaseExclusionRules = CompositeExclusionRules(
            [GlobExclusionRules(DEFAULT_IGNORE_PATTERNS), GlobExclusionRules(ignore_patterns)]
        )
        self.include_rules = GlobExclusionRules(include_patterns)

    @classmethod
    def from_config(cls, config: Configuration) -> "PathFilter":
        """Create the filter described by a run configuration."""
        return cls(
            ignore_patterns=config.ignore_patterns,
            include_patterns=config.include_patterns,
            output_path=config.output_file,
        )

    def is_ignored(self, relative_path: str, is_dir: bool = False) -> bool:
        """Return whether a path matches any ignore pattern or carries the output name.

        Args:
            relative_path: Path relative to the root. Backslashes are normalized
                to forward slashes.
            is_dir: Whether the path is a directory. Directories are also tested
                with a trailing slash so directory-only patterns (``build/``) apply.

        Returns:
            bool: True if the path is ignored.
        """
        path = _normalize(relative_path)
        if self.output_name is not None and path.rsplit("/", 1)[-1] == self.output_name:
            return True
        if self.ignore_rules.exclude(path):
            return True
        return is_dir and self.ignore_rules.exclude(path + "/")

    def is_included(self, relative_path: str) -> bool:
        """Return whether a file is admitted by the include patterns.

        This does not consult the ignore patterns; callers check is_ignored() first.

        Args:
            relative_path: Path of a file relative to the root.

        Returns:
            bool: True if no include patterns are configured or any of them matches.
        """
        if not self.include_rules.has_rules():
            return True
        return self.include_rules.match(_normalize(relative_path))

    def is_output(self, path: PathType) -> bool:
        """Return whether an absolute or cwd-relative path is the output document."""
        return self.output_path is not None and os.path.abspath(path) == self.output_path


def _normalize(relative_path: str) -> str:
    return relative_path.replace("\\", "/").strip("/")
