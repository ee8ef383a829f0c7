"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .extension_rules import ExtensionExclusionRules
from .git_rules import IGNORE_FILE_NAME, GitIgnoreExclusionRules
from .size_rules import SizeExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "ExtensionExclusionRules",
    "GitIgnoreExclusionRules",
    "IGNORE_FILE_NAME",
    "SizeExclusionRules",
]
