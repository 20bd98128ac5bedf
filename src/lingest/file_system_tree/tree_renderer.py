"""Text rendering of a filtered directory tree.

This module provides the TreeRenderer class, which walks a directory, applies the
ignore and include rules of a PathFilter, and renders the surviving entries as a
nested listing in the style of the Unix ``tree`` command.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from anytree import ContStyle, RenderTree

from lingest.file_system_tree.file_system_node import FileSystemNode
from lingest.file_system_tree.listing import child_path, sorted_entries
from lingest.path_filter import PathFilter
from lingest.types import EntryKind, PathType


class TreeRenderer:
    """Renders the directory structure that survives the filter rules.

    The renderer builds an anytree representation of the directory and draws it
    with ``├── `` / ``└── `` connectors and ``│   `` continuation lines. The root
    itself is not shown; the connectors of its children start at column zero.
    Directories carry a trailing ``/``.

    Filtering:
        - Ignored directories are omitted and never descended into.
        - Ignored files are omitted, as are files rejected by include patterns.
        - Include patterns never prune directories, so a directory without any
          included file is still listed.
        - The output document is omitted by its path.
        - Symlinks and special files are not listed.

    An unreadable directory keeps its own line but shows no children; a warning
    is logged and rendering continues with its siblings.

    Attributes:
        root_path (Path): Directory to render.
        path_filter (PathFilter): Rules deciding which entries appear.

    Example:
        >>> renderer = TreeRenderer("project", PathFilter())  # doctest: +SKIP
        >>> print(renderer.render())  # doctest: +SKIP
        ├── src/
        │   ├── utils/
        │   │   └── helpers.py
        │   └── main.py
        └── README.md
    """

    def __init__(self, root_path: PathType, path_filter: PathFilter, logger: Optional[logging.Logger] = None):
        """Initialize a TreeRenderer.

        Args:
            root_path: Directory to render.
            path_filter: Rules deciding which entries appear.
            logger: Destination for diagnostics. Defaults to this module's logger.
        """
        self.root_path = Path(root_path)
        self.path_filter = path_filter
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def build_tree(self) -> FileSystemNode:
        """Build the filtered node tree.

        Children are attached in traversal order (directories first, then
        case-sensitive name order). Directories are expanded from an explicit
        stack, so deep trees do not hit the recursion limit.

        Returns:
            The root node. Its name is the root directory's name.
        """
        root = FileSystemNode(self.root_path.name, is_dir=True)
        pending: List[Tuple[str, FileSystemNode]] = [(str(self.root_path), root)]

        while pending:
            directory, node = pending.pop()
            try:
                entries = sorted_entries(directory)
            except OSError as e:
                self.logger.warning("[Tree] Cannot read directory %s: %s", directory, e)
                continue

            subdirectories = []
            for entry in entries:
                relative_path = child_path(node.relative_path, entry.name)

                if self.path_filter.is_output(entry.path):
                    continue

                if entry.kind is EntryKind.DIRECTORY:
                    if self.path_filter.is_ignored(relative_path, is_dir=True):
                        self.logger.debug("[Tree] Ignoring directory: %s", relative_path)
                        continue
                    child = FileSystemNode(entry.name, parent=node, is_dir=True, relative_path=relative_path)
                    subdirectories.append((entry.path, child))
                elif entry.kind is EntryKind.FILE:
                    if self.path_filter.is_ignored(relative_path):
                        self.logger.debug("[Tree] Ignoring file: %s", relative_path)
                        continue
                    if not self.path_filter.is_included(relative_path):
                        self.logger.debug("[Tree] Skipping file (not in include patterns): %s", relative_path)
                        continue
                    FileSystemNode(entry.name, parent=node, relative_path=relative_path)
                else:
                    self.logger.debug("[Tree] Skipping special file or symlink: %s", relative_path)

            # Reversed so the first subdirectory is expanded next
            pending.extend(reversed(subdirectories))

        return root

    def stream_lines(self) -> Iterator[str]:
        """Generate the rendered tree one line at a time, without newlines."""
        rows = iter(RenderTree(self.build_tree(), style=ContStyle()))
        next(rows)  # the root row
        for row in rows:
            yield f"{row.pre}{row.node.display_name}"

    def render(self) -> str:
        """Render the filtered tree as a single string.

        Returns:
            The tree with lines joined by newlines and trailing whitespace removed.
            An empty string if nothing survives the filter.
        """
        return "\n".join(self.stream_lines()).rstrip()
