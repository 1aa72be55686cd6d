#!/usr/bin/env python3
"""Example type module: a parameterized ``selection`` family.

Each lookup builds a new instance from the spec's ``options`` parameter::

    cmdtypes parse selection gr --param options=red,green,blue \
        --type-module examples/selection_type.py
"""

from __future__ import annotations

from collections.abc import Mapping

from cmdtypes import Conversion, Status, Type, TypeRegistry

MAX_PREDICTIONS = 7


class SelectionType(Type):
    """Accept one of a fixed set of options."""

    name = "selection"

    def __init__(self, type_spec: object) -> None:
        raw = type_spec.get("options", "") if isinstance(type_spec, Mapping) else ""
        if isinstance(raw, str):
            raw = raw.split(",")
        self.options = [str(item).strip() for item in raw if str(item).strip()]

    def to_string(self, value: object) -> str:
        return str(value)

    def from_string(self, text: str) -> Conversion:
        if text in self.options:
            return Conversion(text)
        matches = [option for option in self.options if option.startswith(text)]
        if text and matches:
            return Conversion(
                None,
                Status.INCOMPLETE,
                f"'{text}' matches {len(matches)} option(s)",
                matches[:MAX_PREDICTIONS],
            )
        return Conversion(
            None,
            Status.INVALID,
            f"'{text}' is not one of: {', '.join(self.options) or '<no options>'}",
            self.options[:MAX_PREDICTIONS],
        )


def register_types(registry: TypeRegistry) -> None:
    """Register the class itself so every lookup gets a fresh configured instance."""
    registry.register(SelectionType)
