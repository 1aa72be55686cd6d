"""Pydantic schemas for runtime validation of type specs and CLI inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TypeSpecConfig(BaseModel):
    """Validated name of a type spec passed to ``get_type``.

    Built from the spec's ``name`` alone. The other fields are factory
    parameters; the registry does not read them, and factories always receive
    the caller's original spec object.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(min_length=1)


class TypeModulesConfig(BaseModel):
    """Validated list of type modules to load into a registry."""

    model_config = ConfigDict(extra="forbid")

    modules: list[str] = Field(default_factory=list)

    @field_validator("modules")
    @classmethod
    def _validate_modules(cls, value: list[str]) -> list[str]:
        if any(not item.strip() for item in value):
            raise ValueError("type module entries cannot be empty.")
        return [item.strip() for item in value]
