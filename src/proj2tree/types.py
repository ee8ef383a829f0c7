from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class SkipDecision(Enum):
    """Outcome of the exclusion policy for a single directory entry.

    Attributes:
        INCLUDE: The entry is rendered (and descended into, for directories).
        EXCLUDE_SILENT: The entry is omitted from every section without a trace.
        EXCLUDE_WITH_ELLIPSIS: The directory is listed in the tree with a trailing
            ``...`` marker but never read. The content section skips it entirely.
    """

    INCLUDE = "include"
    EXCLUDE_SILENT = "exclude_silent"
    EXCLUDE_WITH_ELLIPSIS = "exclude_with_ellipsis"
