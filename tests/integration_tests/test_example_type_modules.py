"""Integration tests loading the example type modules from disk."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from cmdtypes import Status, TypeRegistry, create_default_registry, get_type
from cmdtypes.cli import cli as cli_module

runner = CliRunner()


def test_boolean_module_round_trip(examples_dir: Path) -> None:
    """Round-trip values through the example boolean type."""
    registry = create_default_registry([str(examples_dir / "boolean_type.py")])
    boolean = registry.require("bool")
    for value in (True, False):
        conversion = boolean.from_string(boolean.to_string(value))
        assert conversion.status is Status.VALID
        assert conversion.value is value


def test_boolean_module_partial_input(examples_dir: Path) -> None:
    """Report prefixes as incomplete with matching predictions."""
    registry = create_default_registry([str(examples_dir / "boolean_type.py")])
    conversion = registry.require("bool").from_string("t")
    assert conversion.status is Status.INCOMPLETE
    assert conversion.value is None
    assert conversion.predictions == ("true",)


def test_selection_module_builds_fresh_instances(examples_dir: Path) -> None:
    """Configure a new selection instance from each spec."""
    registry = create_default_registry([str(examples_dir / "selection_type.py")])
    colours = registry.get({"name": "selection", "options": ["red", "green"]})
    sizes = registry.get({"name": "selection", "options": ["s", "m", "l"]})
    assert colours is not None and sizes is not None
    assert colours is not sizes
    assert colours.from_string("green").value == "green"
    assert sizes.from_string("green").status is Status.INVALID


def test_cli_loads_module_into_process_registry(
    examples_dir: Path, fresh_registry: TypeRegistry
) -> None:
    """Register types from --type-module into the process-wide registry."""
    result = runner.invoke(
        cli_module.app,
        ["list", "--type-module", str(examples_dir / "boolean_type.py")],
    )
    assert result.exit_code == 0
    assert "bool" in result.output
    assert fresh_registry.names() == ["bool"]
    assert get_type("bool") is fresh_registry.get("bool")


def test_cli_parse_selection_with_params(examples_dir: Path) -> None:
    """Parse against a factory type configured through --param."""
    result = runner.invoke(
        cli_module.app,
        [
            "parse",
            "selection",
            "gr",
            "--param",
            "options=red,green,grey",
            "--type-module",
            str(examples_dir / "selection_type.py"),
        ],
    )
    assert result.exit_code == cli_module.STATUS_EXIT_CODES[Status.INCOMPLETE]
    assert "predictions: green, grey" in result.output


def test_cli_format_boolean(examples_dir: Path) -> None:
    """Normalize boolean spellings to their canonical form."""
    result = runner.invoke(
        cli_module.app,
        ["format", "bool", "YES", "--type-module", str(examples_dir / "boolean_type.py")],
    )
    assert result.exit_code == 0
    assert result.output.strip() == "true"


def test_cli_missing_type_module_fails_cleanly() -> None:
    """Report unimportable type modules as usage errors."""
    result = runner.invoke(
        cli_module.app, ["list", "--type-module", "module.that.does.not.exist"]
    )
    assert result.exit_code != 0
    assert "Unable to import type module" in result.output
