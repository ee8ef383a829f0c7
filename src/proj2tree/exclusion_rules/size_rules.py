"""Size-based exclusion rules for filtering files by size."""

from pathlib import Path
from typing import Union

from humanfriendly import InvalidSize, parse_size

from .base_rules import BaseExclusionRules


def parse_file_size(size: Union[str, int]) -> int:
    """Parse a human-readable file size to bytes.

    Args:
        size: Size string like '1GB', '500MB', '2.5K', '1024', or a plain integer.

    Returns:
        Size in bytes

    Raises:
        ValueError: If size is not a valid size or is negative
    """
    if isinstance(size, bool):
        raise ValueError(f"Invalid size format '{size}'")
    if isinstance(size, int):
        if size < 0:
            raise ValueError("Size cannot be negative")
        return size
    try:
        return int(parse_size(size))
    except InvalidSize as e:
        raise ValueError(f"Invalid size format '{size}': {e}")


class SizeExclusionRules(BaseExclusionRules):
    """Exclusion rules based on file size limits.

    Files strictly larger than the limit are excluded. A file exactly at the limit
    is kept. Directories are never excluded by size.

    Attributes:
        max_size_bytes (int): Maximum allowed file size in bytes.

    Example:
        >>> rules = SizeExclusionRules("1MB")
        >>> rules.max_size_bytes
        1000000
        >>> SizeExclusionRules(2048).max_size_bytes
        2048
    """

    def __init__(self, max_size: Union[str, int]):
        """Initialize size exclusion rules.

        Args:
            max_size: Maximum file size, either a human-readable string
                ('1GB', '500MB', '2.5K') or an integer number of bytes.

        Raises:
            ValueError: If max_size format is invalid
        """
        self.max_size_bytes = parse_file_size(max_size)

    def exclude(self, path: str, is_dir: bool = False) -> bool:
        """Check if a file should be excluded based on size.

        Args:
            path: File path to check.
            is_dir: Whether the path is a directory.

        Returns:
            True if the file exceeds the size limit, False otherwise. Returns False
            when the size cannot be determined.
        """
        if is_dir:
            return False
        try:
            path_obj = Path(path)
            if not path_obj.is_file():
                return False
            return path_obj.stat().st_size > self.max_size_bytes
        except OSError:
            return False
