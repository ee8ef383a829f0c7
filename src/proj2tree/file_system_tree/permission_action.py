"""Permission action enum for handling unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        IGNORE: Keep the directory's own line but skip its contents
        RAISE: Propagate the error and abort the run (default behavior)
    """

    IGNORE = "ignore"
    RAISE = "raise"
