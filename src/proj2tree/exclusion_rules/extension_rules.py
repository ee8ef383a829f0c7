"""Extension-based exclusion rules for skipping binary-like files."""

from pathlib import Path
from typing import FrozenSet, Iterable

from .base_rules import BaseExclusionRules


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and drop any leading dot.

    Example:
        >>> normalize_extension(".PNG")
        'png'
    """
    return extension.strip().lstrip(".").lower()


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclude files whose extension is in a fixed set.

    Only the final suffix is considered and the comparison is case-insensitive, so
    ``archive.tar.GZ`` is matched by ``gz`` but not by ``tar``. Files without an
    extension are never excluded.

    Attributes:
        extensions (FrozenSet[str]): Lowercased extensions without the leading dot.

    Example:
        >>> rules = ExtensionExclusionRules(["png", ".JPG"])
        >>> rules.exclude("logo.PNG")
        True
        >>> rules.exclude("photo.jpg")
        True
        >>> rules.exclude("Makefile")
        False
    """

    def __init__(self, extensions: Iterable[str]):
        self.extensions: FrozenSet[str] = frozenset(normalize_extension(e) for e in extensions if e.strip())

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        if is_dir:
            return False
        suffix = Path(path).suffix
        if not suffix:
            return False
        return normalize_extension(suffix) in self.extensions
