"""Unit tests for pydantic input schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cmdtypes.schemas import TypeModulesConfig, TypeSpecConfig


def test_type_spec_validates_name() -> None:
    """Accept a non-empty string name."""
    assert TypeSpecConfig(name="selection").name == "selection"


def test_type_spec_forbids_other_fields() -> None:
    """Hold only the name; factory parameters stay on the caller's spec."""
    with pytest.raises(ValidationError):
        TypeSpecConfig.model_validate({"name": "selection", "options": ["a"]})


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": 3}])
def test_type_spec_requires_non_empty_string_name(payload: dict[str, object]) -> None:
    """Reject missing, empty and non-string names."""
    with pytest.raises(ValidationError):
        TypeSpecConfig.model_validate(payload)


def test_type_modules_strips_entries() -> None:
    """Strip whitespace around module entries."""
    assert TypeModulesConfig(modules=[" a.b "]).modules == ["a.b"]


def test_type_modules_forbids_unknown_fields() -> None:
    """Reject unexpected configuration keys."""
    with pytest.raises(ValidationError):
        TypeModulesConfig.model_validate({"modules": [], "extra": True})
