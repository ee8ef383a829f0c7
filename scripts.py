"""Developer task runner: ``python scripts.py <task>``."""

import subprocess
import sys

SOURCES = ["src", "tests", "scripts.py"]


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_cli_tests():
    subprocess.run(["pytest", "tests/integration", "--run-cli-tests"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length", "120", *SOURCES], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src/proj2tree"], check=True)


def run_format():
    subprocess.run(["black", *SOURCES], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=proj2tree", "--cov-report=term-missing", "--run-cli-tests"], check=True)


if __name__ == "__main__":
    globals()[sys.argv[1]]()
