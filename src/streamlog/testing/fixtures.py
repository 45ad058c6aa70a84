"""
Pytest fixtures for code that logs through the streamlog registry.

Load them from a conftest with:

    pytest_plugins = ("streamlog.testing.fixtures",)
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from ..core.registry import Registry
from .mocks import CapturingSink


@pytest.fixture
def fresh_registry() -> Generator[Registry, None, None]:
    """A registry singleton that no other test has touched."""
    Registry._reset_instance()
    registry = Registry.instance()
    yield registry
    Registry._reset_instance()


@pytest.fixture
def capturing_sink() -> CapturingSink:
    return CapturingSink()


__all__ = ["fresh_registry", "capturing_sink"]
