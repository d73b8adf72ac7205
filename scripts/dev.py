#!/usr/bin/env python3
"""Development tasks: install, test, lint, type check and build."""

import subprocess
import sys

PACKAGE = "configguard"


def run(command: str) -> int:
    """Run a shell command and return its exit code."""
    print(f"Running: {command}")
    return subprocess.call(command, shell=True)


def run_all(commands) -> int:
    """Run commands in order, stopping at the first failure."""
    for command in commands:
        code = run(command)
        if code != 0:
            return code
    return 0


def install():
    """Install the package with development tools."""
    return run("pip install -e '.[dev]'")


def test():
    """Run all tests with coverage."""
    return run(f"pytest tests/ -v --cov={PACKAGE} --cov-report=term-missing")


def test_unit():
    """Run only unit tests."""
    return run("pytest tests/unit/ -v -m unit")


def lint():
    """Check formatting and style."""
    return run_all([
        f"black --check {PACKAGE}/ tests/",
        f"isort --check {PACKAGE}/ tests/",
        f"flake8 {PACKAGE}/ tests/",
    ])


def typecheck():
    """Run mypy over the package."""
    return run(f"mypy {PACKAGE}/")


def format_code():
    """Format code with black and isort."""
    return run_all([f"black {PACKAGE}/ tests/", f"isort {PACKAGE}/ tests/"])


def clean():
    """Remove build and test artifacts."""
    run("rm -rf build/ dist/ *.egg-info .pytest_cache/ .mypy_cache/ .coverage")
    return run("find . -type d -name __pycache__ -exec rm -rf {} + 2>/dev/null || true")


def build():
    """Build source and wheel distributions."""
    clean()
    return run("python setup.py sdist bdist_wheel")


def scan():
    """Scan the project given as second argument (default: current directory)."""
    root = sys.argv[2] if len(sys.argv) > 2 else "."
    return run(f"{PACKAGE} scan {root} --log-level DEBUG")


if __name__ == "__main__":
    commands = {
        "install": install,
        "test": test,
        "test-unit": test_unit,
        "lint": lint,
        "typecheck": typecheck,
        "format": format_code,
        "clean": clean,
        "build": build,
        "scan": scan,
    }

    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print(f"Usage: python {sys.argv[0]} {{{','.join(commands.keys())}}}")
        sys.exit(1)

    sys.exit(commands[sys.argv[1]]())
