"""Named string <-> value type conversions with a process-wide registry."""

from __future__ import annotations

from cmdtypes.base import NamedSpec, Type, TypeFactory, TypeSpec
from cmdtypes.conversion import Conversion
from cmdtypes.errors import (
    CmdTypesError,
    TypeModuleError,
    TypeSpecError,
    UnknownTypeError,
)
from cmdtypes.registry import (
    TypeRegistry,
    create_default_registry,
    default_registry,
    deregister_type,
    get_type,
    register_type,
    require_type,
)
from cmdtypes.status import Status

__version__ = "0.1.0"

__all__ = [
    "CmdTypesError",
    "Conversion",
    "NamedSpec",
    "Status",
    "Type",
    "TypeFactory",
    "TypeModuleError",
    "TypeRegistry",
    "TypeSpec",
    "TypeSpecError",
    "UnknownTypeError",
    "create_default_registry",
    "default_registry",
    "deregister_type",
    "get_type",
    "register_type",
    "require_type",
]
