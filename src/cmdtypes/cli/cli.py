#!/usr/bin/env python3
"""
cmdtypes.cli.cli

Typer-based CLI for trying registered types against string input.

Types come from type modules loaded with ``--type-module``; the library
itself ships none.

Examples
--------
List the types a module provides:

    cmdtypes list --type-module examples/boolean_type.py

Parse a value and see status, message and predictions:

    cmdtypes parse bool tr --type-module examples/boolean_type.py
"""

from __future__ import annotations

import logging
import traceback

import typer

from cmdtypes.conversion import Conversion
from cmdtypes.errors import CmdTypesError
from cmdtypes.registry import default_registry
from cmdtypes.status import Status

app = typer.Typer(
    name="cmdtypes",
    help="Inspect registered command-line types and try conversions.",
    no_args_is_help=True,
)

TYPE_MODULE_HELP = "Type module import path or file path (repeatable)."
PARAM_HELP = "Type spec parameter KEY=VALUE passed to factory types (repeatable)."

STATUS_EXIT_CODES: dict[Status, int] = {
    Status.VALID: 0,
    Status.INVALID: 3,
    Status.INCOMPLETE: 4,
}

_BOOLEAN_WORDS = {"true": True, "false": False}


# -----------------------------
# Utilities
# -----------------------------
def _exit_for(exc: Exception, debug: bool) -> typer.Exit:
    """Report an error on stderr and build the matching ``typer.Exit``.

    Parameters
    ----------
    exc : Exception
        Error raised while loading, resolving or running a type.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    typer.Exit
        Exit carrying the error's ``exit_code``, or 1 when it has none.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(exc)), err=True)
    code = exc.exit_code if isinstance(exc, CmdTypesError) else 1
    return typer.Exit(code=code)


def _load_type_modules(modules: list[str] | None, debug: bool) -> None:
    """Load type modules into the process-wide registry.

    Parameters
    ----------
    modules : list[str] | None
        Import paths or filesystem paths of type modules.
    debug : bool
        Whether error output includes tracebacks.

    Raises
    ------
    typer.Exit
        With the error's exit code if a module cannot be imported or its
        types cannot be registered.
    """
    registry = default_registry()
    for module in modules or []:
        try:
            registry.load_module(module)
        except CmdTypesError as exc:
            raise _exit_for(exc, debug) from exc


def _coerce_param_value(raw: str) -> object:
    """Read ``true``/``false`` as booleans and numeric text as numbers."""
    if raw.lower() in _BOOLEAN_WORDS:
        return _BOOLEAN_WORDS[raw.lower()]
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _build_type_spec(type_name: str, param_items: list[str] | None) -> str | dict[str, object]:
    """Build a type spec from a name and repeatable KEY=VALUE parameters.

    A bare name is returned unchanged so plain instances are looked up by name.
    """
    if not param_items:
        return type_name
    spec: dict[str, object] = {"name": type_name}
    for item in param_items:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid parameter entry '{item}'. Use KEY=VALUE format."
            )
        key, raw_value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter("Parameter key cannot be empty.")
        if key == "name":
            raise typer.BadParameter("Parameter key 'name' is reserved for the type name.")
        spec[key] = _coerce_param_value(raw_value)
    return spec


def _echo_conversion(conversion: Conversion) -> None:
    """Print every field of a conversion, one per line."""
    typer.echo(f"status: {conversion.status.value}")
    typer.echo(f"value: {conversion.value!r}")
    if conversion.message:
        typer.echo(f"message: {conversion.message}")
    if conversion.predictions:
        typer.echo(f"predictions: {', '.join(conversion.predictions)}")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("list")
def list_cmd(
    ctx: typer.Context,
    type_module: list[str] | None = typer.Option(
        None, "--type-module", help=TYPE_MODULE_HELP
    ),
) -> None:
    """Print the names of registered types."""
    _load_type_modules(type_module, bool(ctx.obj.get("debug", False)))
    names = default_registry().names()
    if not names:
        typer.echo("types: <none>")
        return
    for name in names:
        typer.echo(name)


@app.command("parse")
def parse_cmd(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., help="Registered type name."),
    text: str = typer.Argument(..., help="Input string to convert."),
    param: list[str] | None = typer.Option(None, "--param", help=PARAM_HELP),
    type_module: list[str] | None = typer.Option(
        None, "--type-module", help=TYPE_MODULE_HELP
    ),
) -> None:
    """Convert TEXT with a type and report the conversion.

    The exit code follows the conversion status: 0 for valid, 3 for invalid
    and 4 for incomplete input.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    _load_type_modules(type_module, debug)
    type_spec = _build_type_spec(type_name, param)

    try:
        type_ = default_registry().require(type_spec)
        conversion = type_.from_string(text)
        _echo_conversion(conversion)
        code = STATUS_EXIT_CODES[conversion.status]
    except Exception as exc:
        raise _exit_for(exc, debug) from exc

    if code:
        raise typer.Exit(code=code)


@app.command("format")
def format_cmd(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., help="Registered type name."),
    text: str = typer.Argument(..., help="Input string to normalize."),
    param: list[str] | None = typer.Option(None, "--param", help=PARAM_HELP),
    type_module: list[str] | None = typer.Option(
        None, "--type-module", help=TYPE_MODULE_HELP
    ),
) -> None:
    """Parse TEXT and print the type's canonical string for the value."""
    debug: bool = bool(ctx.obj.get("debug", False))

    _load_type_modules(type_module, debug)
    type_spec = _build_type_spec(type_name, param)

    try:
        type_ = default_registry().require(type_spec)
        conversion = type_.from_string(text)
        if conversion.is_valid:
            rendered = type_.to_string(conversion.value)
        else:
            _echo_conversion(conversion)
            code = STATUS_EXIT_CODES[conversion.status]
    except Exception as exc:
        raise _exit_for(exc, debug) from exc

    if not conversion.is_valid:
        raise typer.Exit(code=code)
    typer.echo(rendered)


if __name__ == "__main__":
    app()
