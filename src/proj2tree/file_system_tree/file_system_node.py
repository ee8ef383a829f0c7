"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a directory flag and an elision flag. An elided node is
    a directory the exclusion policy chose to show without descending into it, so it
    never has children.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        is_elided (bool): True if the directory's contents were intentionally omitted.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> build = FileSystemNode("build", parent=root, is_dir=True, is_elided=True)
        >>> build.label
        'build/ ...'
        >>> FileSystemNode("main.py", parent=root).label
        'main.py'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        is_elided: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.is_elided = is_elided

    @property
    def label(self) -> str:
        """The text shown for this node after the branch glyph."""
        if self.is_elided:
            return f"{self.name}/ ..."
        if self.is_dir:
            return f"{self.name}/"
        return self.name
