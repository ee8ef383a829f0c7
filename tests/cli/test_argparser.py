"""Unit tests for CLI argument parsing in proj2tree."""

from pathlib import Path

import pytest

from proj2tree.cli.argparser import build_run_config, create_parser, validate_args
from proj2tree.file_system_tree.permission_action import PermissionAction


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args([])

    assert args.directory == Path(".")
    assert args.output is None
    assert not args.no_tree
    assert not args.no_contents
    assert not args.print
    assert not args.no_gitignore
    assert args.permission_action == "fail"


def test_all_options(parser):
    args = parser.parse_args(["-o", "out.md", "-T", "-C", "-p", "-G", "-P", "warn", "project"])

    assert args.directory == Path("project")
    assert args.output == Path("out.md")
    assert args.no_tree
    assert args.no_contents
    assert args.print
    assert args.no_gitignore
    assert args.permission_action == "warn"


def test_long_options(parser):
    args = parser.parse_args(["--output", "out.md", "--no-tree", "--print", "--permission-action", "ignore"])
    assert args.output == Path("out.md")
    assert args.no_tree
    assert args.print
    assert args.permission_action == "ignore"


def test_invalid_permission_action(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-P", "sometimes"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_unknown_option(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--tokens"])
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("proj2tree ")


@pytest.mark.parametrize(
    "action,expected",
    [("fail", PermissionAction.RAISE), ("warn", PermissionAction.IGNORE), ("ignore", PermissionAction.IGNORE)],
)
def test_build_run_config_permission_action(parser, action, expected):
    run_config = build_run_config(parser.parse_args(["-P", action]))
    assert run_config.permission_action == expected


def test_build_run_config(parser):
    run_config = build_run_config(parser.parse_args(["-T", "-G", "-o", "snap.md", "project"]))

    assert run_config.target_directory == Path("project")
    assert run_config.output_file == Path("snap.md")
    assert not run_config.include_tree
    assert run_config.include_contents
    assert run_config.no_gitignore
    assert not run_config.print_to_console


def test_validate_args(parser, tmp_path):
    validate_args(parser.parse_args([str(tmp_path)]))

    with pytest.raises(NotADirectoryError, match="is not an existing directory"):
        validate_args(parser.parse_args([str(tmp_path / "missing")]))

    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(NotADirectoryError):
        validate_args(parser.parse_args([str(file_path)]))
