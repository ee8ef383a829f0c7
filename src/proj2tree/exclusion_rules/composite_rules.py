"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be
    excluded. The content section uses this to apply the extension and size filters
    together.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from proj2tree.exclusion_rules.extension_rules import ExtensionExclusionRules
        >>> composite = CompositeExclusionRules([ExtensionExclusionRules(["png"])])
        >>> composite.exclude("logo.png")
        True
        >>> composite.exclude("main.py")
        False
        >>> CompositeExclusionRules([]).exclude("logo.png")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. May be empty, in which
                case nothing is excluded.

        Raises:
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule returns
        True for exclusion.
        """
        return any(rule.exclude(path, is_dir) for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another exclusion rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)
