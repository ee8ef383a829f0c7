"""Command-line interface for proj2tree.

This module provides the command-line entry point. It validates the target
directory, loads the builtin exclusion configuration and the target's .gitignore,
and writes the Markdown document either to a file or to stdout.

Status messages and warnings go to stderr, so stdout carries nothing but the
document when --print is used.

Exit Codes:
    0: Successful completion
    1: Invalid target directory or runtime error
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Write ./tree.md for the current directory
    $ proj2tree

    # Print a snapshot of another directory without the tree
    $ proj2tree -p -T /path/to/project
"""

import sys
from typing import Optional, Sequence

from proj2tree.cli.argparser import build_run_config, create_parser, validate_args
from proj2tree.cli.safe_writer import SafeWriter
from proj2tree.cli.signal_handler import setup_signal_handling, signal_handler
from proj2tree.config import RunConfig, load_builtin_config
from proj2tree.exclusion_rules.git_rules import IGNORE_FILE_NAME, GitIgnoreExclusionRules
from proj2tree.proj2tree import StreamingProj2Tree


def load_ignore_rules(run_config: RunConfig) -> Optional[GitIgnoreExclusionRules]:
    """Load the target's ignore rules unless disabled.

    A missing or unreadable ignore file is reported once on stderr and the run
    continues without ignore rules. So does a file holding only blanks and comments.

    Args:
        run_config: The run configuration.

    Returns:
        The ignore rules, or None when disabled or unavailable.
    """
    if run_config.no_gitignore:
        print(f"Note: {IGNORE_FILE_NAME} rules are disabled", file=sys.stderr)
        return None

    try:
        rules = GitIgnoreExclusionRules.from_directory(run_config.target_directory)
    except OSError as e:
        print(f"Warning: {IGNORE_FILE_NAME} rules not applied: {e}", file=sys.stderr)
        return None

    if not rules.has_rules():
        print(f"Note: {IGNORE_FILE_NAME} contains no rules", file=sys.stderr)
        return None

    print(f"Applying rules from {IGNORE_FILE_NAME}", file=sys.stderr)
    return rules


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the proj2tree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except NotADirectoryError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    run_config = build_run_config(args)

    try:
        config = load_builtin_config()
        ignore_rules = load_ignore_rules(run_config)

        analyzer = StreamingProj2Tree(
            run_config.target_directory,
            config=config,
            run_config=run_config,
            ignore_rules=ignore_rules,
        )

        output = sys.stdout.fileno() if run_config.print_to_console else run_config.output_path

        with SafeWriter(output) as safe_writer:
            try:
                for chunk in analyzer.stream_document():
                    safe_writer.write(chunk)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if args.permission_action == "warn":
            for path, error in analyzer.fs_tree.skipped_directories:
                print(f"Warning: contents of '{path}' skipped: {error.strerror}", file=sys.stderr)

        if not run_config.include_tree and not run_config.include_contents:
            print("Warning: Both tree and contents sections were disabled. Only the title was written.", file=sys.stderr)

        if not run_config.print_to_console:
            print(f"Result saved to file: {run_config.output_path}", file=sys.stderr)
        print(f"Processed directory: {run_config.target_directory}", file=sys.stderr)

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
