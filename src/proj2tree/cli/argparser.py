"""Command-line argument parsing for proj2tree.

This module defines the command-line interface for proj2tree and converts the
parsed arguments into a RunConfig.
"""

import argparse
from pathlib import Path

from proj2tree import __version__
from proj2tree.config import RunConfig
from proj2tree.file_system_tree.permission_action import PermissionAction


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with proj2tree's options.
    """
    description = """
    proj2tree: render a project directory as a single Markdown document.

    The document contains an ASCII tree of the directory followed by the contents of
    every included file in a language-tagged code block. Fences are sized so that no
    file can terminate its own block early.

    Excluded from the output:
    - entries matched by the target's .gitignore (directories shown as "name/ ...")
    - hidden entries, except .gitignore itself
    - directories and files named in the builtin configuration
    - the output document itself
    Binary-looking extensions and oversized files appear in the tree but their
    contents are omitted.
    """

    epilog = """
    Examples:
      # Snapshot the current directory into ./tree.md
      proj2tree

      # Snapshot another directory into a chosen file
      proj2tree /path/to/project -o snapshot.md

      # Print to the console instead of writing a file
      proj2tree -p /path/to/project

      # Tree only, ignoring .gitignore
      proj2tree -C -G /path/to/project

      # Skip unreadable directories instead of failing
      proj2tree -P warn /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="proj2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"proj2tree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to process (default: current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path (default: tree.md inside the target directory).",
    )
    parser.add_argument(
        "-T",
        "--no-tree",
        action="store_true",
        help="Do not include the file tree section.",
    )
    parser.add_argument(
        "-C",
        "--no-contents",
        action="store_true",
        help="Do not include the file contents section.",
    )
    parser.add_argument(
        "-p",
        "--print",
        action="store_true",
        help="Write the document to stdout instead of a file.",
    )
    parser.add_argument(
        "-G",
        "--no-gitignore",
        action="store_true",
        help="Do not apply the rules from the target's .gitignore.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="fail",
        help="How to handle directories that cannot be read (default: fail).",
    )

    return parser


def build_run_config(args: argparse.Namespace) -> RunConfig:
    """Convert parsed arguments into a RunConfig.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The immutable run configuration.
    """
    permission_action = PermissionAction.RAISE if args.permission_action == "fail" else PermissionAction.IGNORE
    return RunConfig(
        target_directory=args.directory,
        output_file=args.output,
        include_tree=not args.no_tree,
        include_contents=not args.no_contents,
        print_to_console=args.print,
        no_gitignore=args.no_gitignore,
        permission_action=permission_action,
    )


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments beyond what argparse checks.

    Args:
        args: Parsed command-line arguments.

    Raises:
        NotADirectoryError: If the target is missing or is not a directory.
    """
    if not args.directory.is_dir():
        raise NotADirectoryError(f"'{args.directory}' is not an existing directory")
