"""Exception types for misuse of the type contract and registry."""

from __future__ import annotations


class CmdTypesError(Exception):
    """Base error for programming-contract violations.

    Bad user input is never reported through these; it travels as a
    ``Conversion`` with a non-valid status.
    """

    exit_code = 1


class TypeSpecError(CmdTypesError, ValueError):
    """Raised when a type spec or registration lacks a usable ``name``."""


class UnknownTypeError(CmdTypesError, LookupError):
    """Raised by ``require_type`` when nothing is registered under a name."""

    exit_code = 5


class TypeModuleError(CmdTypesError, ImportError):
    """Raised when a type module fails to import, execute or register its types."""

    exit_code = 6
