"""Node representation for file system elements in the rendered tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a directory flag and the node's path relative to the
    processed root. Inherits tree traversal and rendering support from anytree.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        relative_path (str): Forward-slash path relative to the root ("" for the root).
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("project", is_dir=True)
        >>> child = FileSystemNode("src", parent=root, is_dir=True, relative_path="src")
        >>> child.display_name
        'src/'
        >>> [node.name for node in root.children]
        ['src']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        relative_path: str = "",
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.relative_path = relative_path

    @property
    def display_name(self) -> str:
        """Name as shown in the tree; directories carry a trailing slash."""
        return f"{self.name}/" if self.is_dir else self.name
