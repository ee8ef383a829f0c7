from abc import ABC, abstractmethod
from typing import Sequence, Union

from proj2tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Concrete rules decide whether a single path should be left out of the generated
    document. The ignore-file matcher works on names and relative paths, while the
    content filters (extension, size) look at the file itself. File loading and
    individual rule addition are optional capabilities that depend on the rule type.

    Example:
        >>> from proj2tree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.exclude('test.py')
        False
        >>>
        >>> from proj2tree.exclusion_rules.size_rules import SizeExclusionRules
        >>> size_rules = SizeExclusionRules('1MB')  # Constructor-only configuration
        >>> size_rules.max_size_bytes
        1000000
    """

    @abstractmethod
    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check.
            is_dir (bool): Whether the path names a directory. Rules that only make
                sense for one kind of entry use this to short-circuit.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default
        implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a gitignore pattern like "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
