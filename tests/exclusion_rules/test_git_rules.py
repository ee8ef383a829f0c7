import os
import tempfile

import pytest

from proj2tree.exclusion_rules.git_rules import IGNORE_FILE_NAME, GitIgnoreExclusionRules


@pytest.fixture
def temp_gitignore():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        f.write("*.txt\n")
        f.write("!important.txt\n")
        f.write("subdir/\n")
        f.write("*.py[cod]\n")
        f.write("**/__pycache__/\n")
    yield f.name
    os.unlink(f.name)


@pytest.mark.parametrize(
    "path,is_dir,expected",
    [
        ("file.txt", False, True),
        ("important.txt", False, False),
        ("file.py", False, False),
        ("subdir", True, True),
        ("subdir", False, False),
        ("subdir/file.py", False, True),
        ("nested/subdir", True, True),
        ("nested/subdir/file.txt", False, True),
        ("file.pyc", False, True),
        ("__pycache__", True, True),
        ("lib/__pycache__", True, True),
        ("another_dir/file.py", False, False),
    ],
)
def test_gitignore_exclusion_rules(temp_gitignore, path, is_dir, expected):
    rules = GitIgnoreExclusionRules(temp_gitignore)
    assert rules.exclude(path, is_dir) == expected, f"Failed for path: {path}"


def test_gitignore_exclusion_rules_empty_file():
    with tempfile.NamedTemporaryFile(mode="w", delete=False) as f:
        pass
    try:
        rules = GitIgnoreExclusionRules(f.name)
        assert not rules.exclude("any_file.txt"), "Empty .gitignore should not exclude any files"
        assert not rules.has_rules()
    finally:
        os.unlink(f.name)


def test_gitignore_exclusion_rules_nonexistent_file():
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules("nonexistent_file")


def test_from_directory_relativizes_absolute_paths(tmp_path):
    (tmp_path / IGNORE_FILE_NAME).write_text("/dist\n*.log\n")
    rules = GitIgnoreExclusionRules.from_directory(tmp_path)

    assert rules.has_rules()
    assert rules.exclude(str(tmp_path / "dist"), is_dir=True)
    assert rules.exclude(str(tmp_path / "logs" / "run.log"))
    # Anchored pattern only matches at the root
    assert not rules.exclude(str(tmp_path / "pkg" / "dist"), is_dir=True)
    assert not rules.exclude(str(tmp_path / "main.py"))


def test_from_directory_never_ignores_root(tmp_path):
    (tmp_path / IGNORE_FILE_NAME).write_text("*\n")
    rules = GitIgnoreExclusionRules.from_directory(tmp_path)

    assert not rules.exclude(str(tmp_path), is_dir=True)
    assert rules.exclude(str(tmp_path / "anything"))


def test_from_directory_without_ignore_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules.from_directory(tmp_path)


def test_from_directory_rejects_ignore_directory(tmp_path):
    (tmp_path / IGNORE_FILE_NAME).mkdir()
    with pytest.raises(FileNotFoundError):
        GitIgnoreExclusionRules.from_directory(tmp_path)


def test_load_rules_incrementally(temp_gitignore, tmp_path):
    npmignore = tmp_path / ".npmignore"
    npmignore.write_text("*.log\n!important.log\n")
    rules = GitIgnoreExclusionRules(temp_gitignore)

    assert not rules.exclude("debug.log")

    rules.load_rules(npmignore)

    assert rules.exclude("file.txt")
    assert rules.exclude("debug.log")
    assert not rules.exclude("important.log")


def test_add_rule_negation_order():
    rules = GitIgnoreExclusionRules()
    rules.add_rule("*.log")
    rules.add_rule("!keep.log")

    assert rules.exclude("drop.log")
    assert not rules.exclude("keep.log")

    rules.add_rule("keep.log")
    assert rules.exclude("keep.log")


def test_comment_only_file_has_no_rules(tmp_path):
    ignore = tmp_path / "ignore"
    ignore.write_text("# just a comment\n\n")
    assert not GitIgnoreExclusionRules(ignore).has_rules()


def test_relative_root_matches_anchored_patterns(tmp_path, monkeypatch):
    project = tmp_path / "proj"
    (project / "docs" / "gen").mkdir(parents=True)
    (project / IGNORE_FILE_NAME).write_text("/secret.txt\ndocs/gen/\n")
    monkeypatch.chdir(tmp_path)

    rules = GitIgnoreExclusionRules.from_directory("proj")

    assert rules.exclude("proj/secret.txt")
    assert rules.exclude("proj/docs/gen", is_dir=True)
    assert rules.exclude(str(project / "secret.txt"))
    assert not rules.exclude("proj/docs/secret.txt")
    assert not rules.exclude("proj", is_dir=True)


def test_dotted_relative_root(tmp_path, monkeypatch):
    project = tmp_path / "proj"
    project.mkdir()
    (project / IGNORE_FILE_NAME).write_text("/build/\n")
    monkeypatch.chdir(project)

    rules = GitIgnoreExclusionRules.from_directory("../proj")

    assert rules.exclude("../proj/build", is_dir=True)
    assert rules.exclude("build", is_dir=True)
