"""Project to Markdown snapshot utilities.

This package renders a directory as a single Markdown document: an ASCII tree
of the structure followed by the contents of every included file, each wrapped
in a code fence that its own content cannot close.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("proj2tree")
except PackageNotFoundError:
    __version__ = "unknown"
