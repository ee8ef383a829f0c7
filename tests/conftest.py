"""Test configuration and fixtures for proj2tree."""

from pathlib import Path

import pytest

from proj2tree.config import ExclusionConfig


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def exclusion_config():
    """A small, explicit configuration so tests don't depend on the packaged defaults."""
    return ExclusionConfig(
        exclude_dirs=frozenset({"build", "node_modules"}),
        exclude_files=("Cargo.lock", "*.pyc"),
        exclude_extensions=frozenset({"png", "bin"}),
        max_file_size=64,
        extension_mapping={"py": "python", "rs": "rust", "md": "markdown"},
    )


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """A project with hidden, excluded and ignored entries.

    Layout::

        .gitignore        (*.tmp, logs/)
        .secret
        Cargo.lock
        README.md
        a.txt
        build/x.txt
        logs/app.txt
        src/main.py
        src/cache.pyc
        src/scratch.tmp
        src/logo.png
        big.py            (over the 64 byte limit)
    """
    (tmp_path / ".gitignore").write_text("*.tmp\nlogs/\n")
    (tmp_path / ".secret").write_text("token")
    (tmp_path / "Cargo.lock").write_text("lock")
    (tmp_path / "README.md").write_text("# Readme\n")
    (tmp_path / "a.txt").write_text("hello")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "x.txt").write_text("built")
    (tmp_path / "logs").mkdir()
    (tmp_path / "logs" / "app.txt").write_text("log line")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("print('hi')\n")
    (tmp_path / "src" / "cache.pyc").write_bytes(b"\x00\x01")
    (tmp_path / "src" / "scratch.tmp").write_text("tmp")
    (tmp_path / "src" / "logo.png").write_bytes(b"\x89PNG")
    (tmp_path / "big.py").write_text("x = 1\n" * 20)
    return tmp_path
