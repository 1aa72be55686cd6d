"""Type registry and type-module discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Literal

from pydantic import ValidationError

from cmdtypes.base import Type, TypeFactory, TypeSpec
from cmdtypes.errors import TypeModuleError, TypeSpecError, UnknownTypeError
from cmdtypes.schemas import TypeModulesConfig, TypeSpecConfig

logger = logging.getLogger(__name__)

type EntryKind = Literal["instance", "factory", "opaque"]


@dataclass(frozen=True)
class RegistryEntry:
    """Registered object tagged with how ``get`` should resolve it."""

    kind: EntryKind
    target: Type | TypeFactory | object

    @classmethod
    def classify(cls, target: object) -> RegistryEntry:
        """Tag ``target`` as a ready instance, a factory, or neither."""
        if isinstance(target, Type):
            return cls("instance", target)
        if callable(target):
            return cls("factory", target)
        return cls("opaque", target)


class TypeRegistry:
    """Registry mapping type names to type instances or type factories.

    Invariant: every key equals the ``name`` the entry was registered under.
    """

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._lock = threading.RLock()

    def register(self, type_: object, name: str | None = None) -> None:
        """Register a type instance or factory, replacing any entry with the same name.

        Parameters
        ----------
        type_ : object
            ``Type`` instance, or a callable taking a type spec and returning
            one. Stored as given.
        name : str | None, default=None
            Registry key. Defaults to ``type_.name``; required for plain
            functions, which carry no ``name`` attribute.

        Raises
        ------
        TypeSpecError
            If no non-empty name can be derived.
        """
        key = name if name is not None else getattr(type_, "name", None)
        if not isinstance(key, str) or not key.strip():
            raise TypeSpecError(
                f"Cannot register {type_!r}: it must define a non-empty 'name'."
            )
        entry = RegistryEntry.classify(type_)
        with self._lock:
            replaced = key in self._entries
            self._entries[key] = entry
        logger.debug(
            "%s type %r as %s entry", "replaced" if replaced else "registered", key, entry.kind
        )

    def deregister(self, type_: TypeSpec) -> None:
        """Remove the entry registered under ``type_``'s name, if any.

        Parameters
        ----------
        type_ : TypeSpec
            A name, a mapping with a ``"name"`` key, or an object with a
            ``name`` attribute. Unknown names are ignored.
        """
        key = _name_of(type_)
        if key is None:
            return
        with self._lock:
            removed = self._entries.pop(key, None)
        if removed is not None:
            logger.debug("deregistered type %r", key)

    def names(self) -> list[str]:
        """Return registered type names.

        Returns
        -------
        list[str]
            Sorted list of type names.
        """
        with self._lock:
            return sorted(self._entries)

    def get(self, type_spec: TypeSpec) -> Type | None:
        """Resolve a type reference to a type instance.

        Parameters
        ----------
        type_spec : TypeSpec
            A type name, or a spec (mapping or object) with a ``name`` plus
            optional parameters for factory entries.

        Returns
        -------
        Type | None
            The registered instance (spec parameters ignored), a fresh
            instance built by the registered factory from the full
            ``type_spec``, or ``None`` when nothing usable is registered.

        Raises
        ------
        TypeSpecError
            If a non-string ``type_spec`` has no ``name``.
        """
        if isinstance(type_spec, str):
            key = type_spec
        else:
            key = _validate_spec(type_spec).name

        with self._lock:
            entry = self._entries.get(key)

        if entry is None:
            return None
        if entry.kind == "instance":
            return entry.target
        if entry.kind == "factory":
            return entry.target(type_spec)
        return None

    def require(self, type_spec: TypeSpec) -> Type:
        """Resolve a type reference, raising if it is unknown.

        Parameters
        ----------
        type_spec : TypeSpec
            See ``get``.

        Returns
        -------
        Type
            Resolved type instance.

        Raises
        ------
        UnknownTypeError
            If no usable entry is registered for the name.
        """
        found = self.get(type_spec)
        if found is None:
            name = type_spec if isinstance(type_spec, str) else _name_of(type_spec)
            raise UnknownTypeError(
                f"Unknown type '{name}'. Available types: {', '.join(self.names()) or '<none>'}"
            )
        return found

    def load_module(self, module_or_path: str) -> None:
        """Load type providers from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load
            type modules from trusted sources.

        Parameters
        ----------
        module_or_path : str
            Python import path or filesystem path to a type module.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)
        logger.debug("loaded type module %s", module_or_path)


def _raw_name(type_spec: TypeSpec) -> object:
    """Return the ``name`` a spec carries, without looking at any other field."""
    if isinstance(type_spec, str):
        return type_spec
    if isinstance(type_spec, Mapping):
        return type_spec.get("name")
    return getattr(type_spec, "name", None)


def _name_of(type_spec: TypeSpec) -> str | None:
    name = _raw_name(type_spec)
    return name if isinstance(name, str) and name else None


def _validate_spec(type_spec: TypeSpec) -> TypeSpecConfig:
    """Validate that a non-string type spec carries a name.

    Only the name is validated; the remaining fields belong to factories and
    may use any keys.

    Raises
    ------
    TypeSpecError
        If the spec has no usable ``name``.
    """
    try:
        return TypeSpecConfig(name=_raw_name(type_spec))
    except ValidationError as exc:
        raise TypeSpecError(f"Missing 'name' member in type spec {type_spec!r}") from exc


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import a type module by dotted path or by file path.

    .. warning::
        Importing runs the module's top-level code. Only load type modules
        from trusted sources.

    Parameters
    ----------
    module_or_path : str
        Existing file path, or a dotted module path.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    TypeModuleError
        If the file has no loader, or if importing or executing it fails.
    """
    candidate = Path(module_or_path)
    if not candidate.exists():
        try:
            return importlib.import_module(module_or_path)
        except Exception as exc:
            raise TypeModuleError(
                f"Unable to import type module '{module_or_path}': {exc}"
            ) from exc

    spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
    if spec is None or spec.loader is None:
        raise TypeModuleError(f"Unable to load type module from {candidate}.")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise TypeModuleError(
            f"Unable to execute type module {candidate}: {type(exc).__name__}: {exc}"
        ) from exc
    return module


def _register_exposed_types(module: ModuleType, registry: TypeRegistry) -> bool:
    """Register whatever the module exposes; ``False`` when it exposes nothing."""
    hook = getattr(module, "register_types", None)
    if hook is not None:
        hook(registry)
        return True

    exposed = getattr(module, "TYPES", None)
    if exposed is None:
        single = getattr(module, "TYPE", None)
        if single is None:
            return False
        exposed = [single]
    for type_ in exposed:
        registry.register(type_)
    return True


def _register_from_module(module: ModuleType, registry: TypeRegistry) -> None:
    """Register the types a type module exposes.

    Modules expose ``register_types(registry)``, a ``TYPES`` iterable or a
    single ``TYPE``, checked in that order.

    Raises
    ------
    TypeModuleError
        If the module exposes none of these, or registering its types fails.
    """
    label = getattr(module, "__name__", type(module).__name__)
    try:
        exposed = _register_exposed_types(module, registry)
    except Exception as exc:
        raise TypeModuleError(
            f"Type module '{label}' failed to register its types: {exc}"
        ) from exc
    if not exposed:
        raise TypeModuleError(
            "Type module must expose register_types(registry), TYPES, or TYPE."
        )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> TypeRegistry:
    """Create a standalone registry.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Type modules to load into the new registry.

    Returns
    -------
    TypeRegistry
        Registry holding the types from ``extra_modules``.

    Raises
    ------
    TypeModuleError
        If the module list is invalid or a module cannot be loaded.
    """
    try:
        payload = TypeModulesConfig(modules=list(extra_modules or []))
    except ValidationError as exc:
        raise TypeModuleError(f"Invalid type module list: {exc}") from exc

    registry = TypeRegistry()
    for module in payload.modules:
        registry.load_module(module)
    return registry


# Process-wide registry used by the module-level functions below.
_registry = TypeRegistry()


def default_registry() -> TypeRegistry:
    """Return the process-wide registry."""
    return _registry


def register_type(type_: object, name: str | None = None) -> None:
    """Add a type (or type factory) to the process-wide registry."""
    _registry.register(type_, name=name)


def deregister_type(type_: TypeSpec) -> None:
    """Remove a type from the process-wide registry."""
    _registry.deregister(type_)


def get_type(type_spec: TypeSpec) -> Type | None:
    """Find a type previously added with ``register_type``."""
    return _registry.get(type_spec)


def require_type(type_spec: TypeSpec) -> Type:
    """Like ``get_type`` but raise ``UnknownTypeError`` instead of returning ``None``."""
    return _registry.require(type_spec)
