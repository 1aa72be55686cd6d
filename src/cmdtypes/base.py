"""Type contract and factory protocol for string conversions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from cmdtypes.conversion import Conversion


class NamedSpec(Protocol):
    """Any object whose ``name`` attribute names a registered type."""

    name: str | None


type TypeSpec = str | Mapping[str, Any] | NamedSpec


class Type:
    """Base class for named string <-> value converters.

    Most types are static, e.g. there is only one ``text`` type, but some
    (``selection``, ``deferred``) are customized per use. Those share a
    ``name`` and carry their extra configuration as instance state, so the
    name alone does not fully specify a type.

    The base class is not useful on its own: both conversion methods raise
    until a subclass overrides them.
    """

    name: str | None = None

    def to_string(self, value: Any) -> str:
        """Convert ``value`` to its string representation.

        Parameters
        ----------
        value : Any
            Value of this type.

        Returns
        -------
        str
            String form. Where possible ``from_string`` of this string should
            give back an equivalent value.

        Raises
        ------
        NotImplementedError
            Always, on the base class.
        """
        raise NotImplementedError(f"{type(self).__name__}.to_string is not implemented")

    def from_string(self, text: str) -> Conversion:
        """Convert ``text`` to a value of this type.

        Parameters
        ----------
        text : str
            User input, possibly partial.

        Returns
        -------
        Conversion
            Parse outcome. Bad input is reported through ``Conversion.status``
            and ``Conversion.message``, never raised.

        Raises
        ------
        NotImplementedError
            Always, on the base class.
        """
        raise NotImplementedError(
            f"{type(self).__name__}.from_string is not implemented"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"


@runtime_checkable
class TypeFactory(Protocol):
    """Callable that builds a configured ``Type`` from a type spec."""

    def __call__(self, type_spec: TypeSpec) -> Type:
        """Build a type instance.

        Parameters
        ----------
        type_spec : TypeSpec
            The spec passed to ``get_type``, including any parameter fields.

        Returns
        -------
        Type
            Freshly configured type instance.
        """
