"""Integration tests for the command-line interface.

These tests run proj2tree in a subprocess and cover:
- Default output file and self-exclusion on re-runs
- Console output and section toggles
- .gitignore handling
- Permission action handling
- Exit codes for invalid input
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    (tmp_path / "src").mkdir()
    (tmp_path / "target").mkdir()
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "generated").mkdir()

    (tmp_path / "src" / "main.rs").write_text('fn main() {\n    println!("hi");\n}\n')
    (tmp_path / "src" / "lib.js").write_text("const s = `${name}`;\n")
    (tmp_path / "target" / "app").write_bytes(b"\x7fELF")
    (tmp_path / "node_modules" / "module.js").write_text("export default {}\n")
    (tmp_path / "generated" / "out.txt").write_text("generated\n")
    (tmp_path / "Cargo.lock").write_text("# lock\n")
    (tmp_path / "logo.png").write_bytes(b"\x89PNG\r\n")
    (tmp_path / ".env").write_text("SECRET=1\n")
    (tmp_path / ".gitignore").write_text("generated/\n")
    (tmp_path / "README.md").write_text("# Demo\n\n```sh\ncargo run\n```\n")
    return tmp_path


def run_cli(*args, cwd=None):
    """Run proj2tree in a subprocess and return the completed process."""
    return subprocess.run(
        [sys.executable, "-m", "proj2tree.cli.main", *map(str, args)],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=cwd,
    )


def test_default_output_file(temp_project):
    result = run_cli(temp_project)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    document = (temp_project / "tree.md").read_text(encoding="utf-8")

    assert "├── .gitignore\n" in document
    assert "├── README.md\n" in document
    assert "├── generated/ ...\n" in document
    assert "├── logo.png\n" in document
    assert "├── node_modules/ ...\n" in document
    assert "├── src/\n    ├── lib.js\n    └── main.rs\n" in document
    assert "└── target/ ...\n" in document
    assert ".env" not in document
    assert "Cargo.lock" not in document
    assert "### `logo.png`" not in document
    assert "````markdown\n# Demo\n" in document
    assert "````javascript\nconst s = `${name}`;\n````\n" in document
    assert '```rust\nfn main() {\n    println!("hi");\n}\n```\n' in document


def test_rerun_is_stable(temp_project):
    assert run_cli(temp_project).returncode == 0
    first = (temp_project / "tree.md").read_text(encoding="utf-8")
    assert run_cli(temp_project).returncode == 0
    assert (temp_project / "tree.md").read_text(encoding="utf-8") == first
    assert "tree.md" not in first


def test_current_directory(temp_project):
    result = run_cli("-p", cwd=temp_project)
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("# Структура проекта: текущая директория\n\n")


def test_print_and_toggles(temp_project):
    result = run_cli("-p", "-C", temp_project)

    assert result.returncode == 0
    assert "## Дерево файлов" in result.stdout
    assert "## Содержимое файлов" not in result.stdout
    assert not (temp_project / "tree.md").exists()

    result = run_cli("-p", "-T", temp_project)
    assert "## Дерево файлов" not in result.stdout
    assert "## Содержимое файлов" in result.stdout


def test_no_gitignore(temp_project):
    result = run_cli("-p", "-G", temp_project)
    assert "├── generated/\n    └── out.txt\n" in result.stdout
    assert "Note: .gitignore rules are disabled" in result.stderr


def test_invalid_directory(temp_project):
    result = run_cli(temp_project / "missing")
    assert result.returncode == 1
    assert "Error:" in result.stderr


def test_invalid_option():
    result = run_cli("--permission-action", "maybe")
    assert result.returncode == 2


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("proj2tree ")


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="requires POSIX permissions as non-root")
def test_unreadable_directory(temp_project):
    locked = temp_project / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("secret")
    locked.chmod(0)
    try:
        result = run_cli("-p", temp_project)
        assert result.returncode == 126

        result = run_cli("-p", "-P", "warn", temp_project)
        assert result.returncode == 0
        assert "├── locked/\n" in result.stdout
        assert "Warning: contents of" in result.stderr

        result = run_cli("-p", "-P", "ignore", temp_project)
        assert result.returncode == 0
        assert "Warning: contents of" not in result.stderr
    finally:
        locked.chmod(0o755)


def test_output_outside_target(temp_project, tmp_path_factory):
    output = Path(tmp_path_factory.mktemp("out")) / "snapshot.md"
    result = run_cli(temp_project, "-o", output)
    assert result.returncode == 0
    assert output.read_text(encoding="utf-8").startswith(f"# Структура проекта: {temp_project}\n")
