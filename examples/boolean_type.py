#!/usr/bin/env python3
"""Example type module: a static ``bool`` type.

Load it with ``cmdtypes parse bool tr --type-module examples/boolean_type.py``.
"""

from __future__ import annotations

from cmdtypes import Conversion, Status, Type

_WORDS = {"true": True, "false": False, "yes": True, "no": False}


class BooleanType(Type):
    """Parse ``true``/``false``/``yes``/``no`` case-insensitively."""

    name = "bool"

    def to_string(self, value: object) -> str:
        return "true" if value else "false"

    def from_string(self, text: str) -> Conversion:
        lowered = text.strip().lower()
        if lowered in _WORDS:
            return Conversion(_WORDS[lowered])
        predictions = [word for word in _WORDS if word.startswith(lowered)]
        if lowered and predictions:
            return Conversion(
                None, Status.INCOMPLETE, f"'{text}' is not finished", predictions
            )
        return Conversion(
            None, Status.INVALID, f"'{text}' is not a boolean", ["true", "false"]
        )


TYPE = BooleanType()
