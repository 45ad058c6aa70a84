"""
Root pytest configuration.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

# Register streamlog testing fixtures for all tests
pytest_plugins = ("streamlog.testing.fixtures",)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "critical: Tests that must never fail - core functionality",
    )
    config.addinivalue_line(
        "markers",
        "concurrency: Tests that exercise the registry from many threads",
    )
    config.addinivalue_line(
        "markers",
        "property: Property-based tests (may be slow)",
    )


@pytest.fixture(autouse=True)
def reset_diagnostics_cache() -> Generator[None, None, None]:
    """Reset the diagnostics enable flag before and after each test.

    The diagnostics module caches ``internal_logging_enabled`` at first
    access; tests must not inherit it from each other.
    """
    import streamlog.core.diagnostics as diag

    diag._internal_logging_enabled = None
    yield
    diag._internal_logging_enabled = None


@pytest.fixture(autouse=True)
def _reset_registry_singleton() -> Generator[None, None, None]:
    """Give every test its own registry singleton."""
    from streamlog.core.registry import Registry

    Registry._reset_instance()
    yield
    Registry._reset_instance()
