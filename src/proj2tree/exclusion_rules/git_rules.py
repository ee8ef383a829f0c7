"""Implementation of exclusion rules using .gitignore pattern syntax."""

import os
from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from proj2tree.types import PathType

from .base_rules import BaseExclusionRules

IGNORE_FILE_NAME = ".gitignore"


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    Patterns are compiled with pathspec's GitIgnoreSpec, which follows Git's own
    matching semantics, including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    When a root directory is given, paths under it (absolute, or relative to the
    current directory) are converted to root-relative POSIX paths before matching,
    so callers can pass the paths they get from a directory listing. Directories
    are matched with a trailing slash so that patterns such as ``build/`` only hit
    directories.

    Attributes:
        root (Optional[Path]): Directory the patterns are anchored to.
        spec (GitIgnoreSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build", is_dir=True)
        True
        >>> rules.exclude("build", is_dir=False)
        False
        >>> rules.add_rule("*.log")
        >>> rules.exclude("logs/app.log")
        True
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        root: Optional[PathType] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            root: Directory the patterns are relative to. Defaults to None, in which
                case paths are matched exactly as given.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.root = Path(os.path.abspath(root)) if root is not None else None
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    @classmethod
    def from_directory(cls, directory: PathType) -> "GitIgnoreExclusionRules":
        """Build rules from the ignore file at the root of ``directory``.

        Only that single file is consulted; ignore files in subdirectories are not
        composed.

        Args:
            directory: The directory whose ``.gitignore`` should be loaded.

        Returns:
            Rules anchored at ``directory``.

        Raises:
            FileNotFoundError: If ``directory`` has no ``.gitignore``.
        """
        return cls(Path(directory) / IGNORE_FILE_NAME, root=directory)

    def _relativize(self, path: str) -> str:
        # Relative paths are taken from the current directory, like the root itself.
        if self.root is not None:
            try:
                path = Path(os.path.abspath(path)).relative_to(self.root).as_posix()
            except ValueError:
                pass
        return path.replace("\\", "/")

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        Args:
            path: The path to check. With a root, any path that resolves under it is
                relativized first; other paths are matched as given.
            is_dir: Whether the path is a directory.

        Returns:
            bool: True if the path is ignored, False otherwise. The root itself is
                never ignored.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        relative = self._relativize(str(path))
        if relative in ("", "."):
            return False
        if is_dir and not relative.endswith("/"):
            relative += "/"
        return self.spec.match_file(relative)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are processed in the order they are added, with later patterns
        potentially overriding earlier ones (especially in the case of negation with !).

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8", errors="replace") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "node_modules/",
                 "!important.txt").
        """
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        """Check whether any pattern lines (not blanks or comments) have been loaded."""
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)
