"""Shared pytest configuration, marker assignment and registry isolation."""

from __future__ import annotations

from pathlib import Path

import pytest

from cmdtypes.registry import TypeRegistry

EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def fresh_registry(monkeypatch: pytest.MonkeyPatch) -> TypeRegistry:
    """Swap the process-wide registry for an empty one during each test."""
    registry = TypeRegistry()
    monkeypatch.setattr("cmdtypes.registry._registry", registry)
    return registry


@pytest.fixture
def examples_dir() -> Path:
    """Return the directory holding the example type modules."""
    return EXAMPLES_DIR
