from __future__ import annotations

from collections.abc import Iterator

import pytest

from revcmd_core.instrumentation import HookRegistry, set_hook_registry


@pytest.fixture(autouse=True)
def fresh_hook_registry() -> Iterator[HookRegistry]:
    """Give every test its own context-local hook registry."""
    registry = HookRegistry()
    set_hook_registry(registry)
    yield registry
    set_hook_registry(None)


@pytest.fixture()
def calls() -> list[str]:
    return []
