"""File system tree representation filtered by the exclusion policy.

This module provides the FileSystemTree class, which reads a directory recursively,
asks the ExclusionPolicy about every entry and renders the surviving entries as the
ASCII tree section of the document.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from proj2tree.exclusion_policy import ExclusionPolicy
from proj2tree.file_system_tree.file_system_node import FileSystemNode
from proj2tree.file_system_tree.permission_action import PermissionAction
from proj2tree.types import PathType, SkipDecision

INDENT = "    "
BRANCH = "├── "
LAST_BRANCH = "└── "


class FileSystemTree:
    """A tree representation of a directory structure filtered by an exclusion policy.

    The tree is built lazily on first access. Siblings are sorted by name, entries
    the policy drops silently are removed before branch glyphs are assigned (so the
    last rendered line of every directory uses the closing glyph), and directories
    the policy elides are recorded without being read.

    Symbolic links are followed like the entries they point to. There is no loop
    detection.

    Permission Handling:
        Errors while listing a directory are handled according to permission_action:
        - RAISE (default): the error propagates and aborts the traversal
        - IGNORE: the directory keeps its own line but is shown without children

    Attributes:
        root_path (Path): The root directory.
        policy (ExclusionPolicy): Decides what is shown.
        permission_action (PermissionAction): How to handle unreadable directories.
        skipped_directories (List[Tuple[Path, OSError]]): Directories shown without
            children because they could not be listed (IGNORE mode only).

    Example:
        >>> tree = FileSystemTree("project", ExclusionPolicy(ExclusionConfig()))  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        ├── a.txt
        ├── build/ ...
        └── src/
            └── main.rs
    """

    def __init__(
        self,
        root_path: PathType,
        policy: ExclusionPolicy,
        permission_action: PermissionAction = PermissionAction.RAISE,
    ) -> None:
        self.root_path = Path(root_path)
        self.policy = policy
        self.permission_action = permission_action
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0
        self.skipped_directories: List[Tuple[Path, OSError]] = []

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filtered tree, building it if needed.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If a directory cannot be listed and permission_action is RAISE.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def _build_tree(self) -> FileSystemNode:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(self.root_path.name or str(self.root_path), is_dir=True)
        self._add_children(root, self.root_path)
        self._count_files_and_directories(root)
        return root

    def _list_directory(self, path: Path) -> List[str]:
        try:
            return sorted(os.listdir(path))
        except OSError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise OSError(e.errno, f"Failed to read directory '{path}': {e.strerror}") from e
            self.skipped_directories.append((path, e))
            return []

    def _add_children(self, node: FileSystemNode, path: Path) -> None:
        """Attach the visible children of ``path`` to ``node`` and recurse."""
        for name in self._list_directory(path):
            child_path = path / name
            is_dir = child_path.is_dir()
            decision = self.policy.decide(child_path, is_dir)

            if decision is SkipDecision.EXCLUDE_SILENT:
                continue
            if decision is SkipDecision.EXCLUDE_WITH_ELLIPSIS:
                FileSystemNode(name, parent=node, is_dir=True, is_elided=True)
                continue

            child = FileSystemNode(name, parent=node, is_dir=is_dir)
            if is_dir:
                self._add_children(child, child_path)

    def _count_files_and_directories(self, root: FileSystemNode) -> None:
        self._file_count = 0
        self._directory_count = 0
        for node in PreOrderIter(root):
            if node.is_root:
                continue
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Number of files shown in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of directories shown in the tree, elided ones included, root excluded."""
        self.get_tree()
        return self._directory_count

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over every included file in tree order.

        Elided directories have no children, so nothing inside them is yielded.

        Yields:
            Pairs of (absolute_path, relative_path) where the relative path uses
            forward slashes.
        """
        root = self.get_tree()
        for node in PreOrderIter(root):
            if node.is_dir:
                continue
            parts = [n.name for n in node.path[1:]]
            yield str(self.root_path.joinpath(*parts)), "/".join(parts)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree section one line at a time.

        Each line is four spaces per depth level, a branch glyph and the node label.
        The root itself is not printed.

        Yields:
            Lines of the tree representation, without trailing newlines.
        """
        root = self.get_tree()
        for node in PreOrderIter(root):
            if node.is_root:
                continue
            is_last = node is node.parent.children[-1]
            glyph = LAST_BRANCH if is_last else BRANCH
            yield f"{INDENT * (node.depth - 1)}{glyph}{node.label}"

    def get_tree_representation(self) -> str:
        """Get the complete tree section as a single string."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self.skipped_directories = []
        self._tree = self._build_tree()
