"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import cmdtypes


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert cmdtypes.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["cmdtypes", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Inspect registered command-line types" in result.stdout


def test_cli_parse_exit_code_follows_status(examples_dir: Path) -> None:
    """Ensure the parse exit code reflects an invalid conversion."""
    result = subprocess.run(
        [
            "cmdtypes",
            "parse",
            "bool",
            "maybe",
            "--type-module",
            str(examples_dir / "boolean_type.py"),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 3, result.stderr
    assert "status: invalid" in result.stdout
    assert "predictions: true, false" in result.stdout
