"""The single exclusion policy shared by the tree and content sections.

Both renderers ask the same ExclusionPolicy about every entry, so the two sections
can never disagree about what was left out.
"""

from pathlib import Path
from typing import Optional

from proj2tree.config import DEFAULT_OUTPUT_NAME, ExclusionConfig
from proj2tree.exclusion_rules.base_rules import BaseExclusionRules
from proj2tree.exclusion_rules.git_rules import IGNORE_FILE_NAME
from proj2tree.types import PathType, SkipDecision


def matches_file_pattern(name: str, pattern: str) -> bool:
    """Check a file name against one ``exclude_files`` pattern.

    A ``*.ext`` pattern matches any name containing ``.ext``, which includes names
    ending with it as well as names such as ``bundle.js.map`` for ``*.js``. Any other
    pattern must equal the name exactly.

    Example:
        >>> matches_file_pattern("main.pyc", "*.pyc")
        True
        >>> matches_file_pattern("bundle.js.map", "*.js")
        True
        >>> matches_file_pattern("happy", "*.py")
        False
        >>> matches_file_pattern("Cargo.lock", "Cargo.lock")
        True
        >>> matches_file_pattern("Cargo.lock.bak", "Cargo.lock")
        False
    """
    if pattern.startswith("*."):
        return f".{pattern[2:]}" in name
    return name == pattern


class ExclusionPolicy:
    """Decide, for one directory entry, whether and how it appears in the output.

    Rules are evaluated in priority order and the first match wins:

    1. Ignore file: ignored directories are elided, ignored files dropped.
    2. Hidden entries (leading dot) are dropped, except the ignore file itself.
    3. Directories named in ``exclude_dirs`` are elided.
    4. Files matching an ``exclude_files`` pattern are dropped.
    5. An entry named like the output document is dropped.

    Everything else is included. The decision depends only on the entry and the
    values given to the constructor.

    Attributes:
        config (ExclusionConfig): The builtin exclusion configuration.
        output_name (str): Basename of the output document.
        ignore_rules (Optional[BaseExclusionRules]): The ignore-file matcher, if any.

    Example:
        >>> policy = ExclusionPolicy(ExclusionConfig(exclude_dirs=frozenset({"build"})))
        >>> policy.decide("project/build", is_dir=True)
        <SkipDecision.EXCLUDE_WITH_ELLIPSIS: 'exclude_with_ellipsis'>
        >>> policy.decide("project/.env", is_dir=False)
        <SkipDecision.EXCLUDE_SILENT: 'exclude_silent'>
        >>> policy.decide("project/.gitignore", is_dir=False)
        <SkipDecision.INCLUDE: 'include'>
        >>> policy.decide("project/tree.md", is_dir=False)
        <SkipDecision.EXCLUDE_SILENT: 'exclude_silent'>
    """

    def __init__(
        self,
        config: ExclusionConfig,
        output_name: str = DEFAULT_OUTPUT_NAME,
        ignore_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.config = config
        self.output_name = output_name
        self.ignore_rules = ignore_rules

    def decide(self, path: PathType, is_dir: Optional[bool] = None) -> SkipDecision:
        """Compute the skip decision for the entry at ``path``.

        Args:
            path: Path of the entry. Its basename is used for the name-based rules
                and the full path is handed to the ignore matcher.
            is_dir: Whether the entry is a directory. Looked up on disk (following
                symlinks) when omitted.

        Returns:
            The SkipDecision for the entry.
        """
        path = Path(path)
        name = path.name
        if is_dir is None:
            is_dir = path.is_dir()

        if self.ignore_rules is not None and self.ignore_rules.exclude(str(path), is_dir):
            return SkipDecision.EXCLUDE_WITH_ELLIPSIS if is_dir else SkipDecision.EXCLUDE_SILENT

        if name.startswith(".") and name != IGNORE_FILE_NAME:
            return SkipDecision.EXCLUDE_SILENT

        if is_dir and name in self.config.exclude_dirs:
            return SkipDecision.EXCLUDE_WITH_ELLIPSIS

        if not is_dir and any(matches_file_pattern(name, pattern) for pattern in self.config.exclude_files):
            return SkipDecision.EXCLUDE_SILENT

        if name == self.output_name:
            return SkipDecision.EXCLUDE_SILENT

        return SkipDecision.INCLUDE
