"""
Testing utilities for streamlog sinks.

This module provides an in-memory capturing sink, a protocol validator and
pytest fixtures.

Example:
    from streamlog.testing import CapturingSink, validate_sink

    def test_my_sink():
        result = validate_sink(MySink())
        assert result.valid
"""

from .mocks import CapturingSink
from .validators import ProtocolViolationError, ValidationResult, validate_sink

__all__ = [
    "CapturingSink",
    "validate_sink",
    "ValidationResult",
    "ProtocolViolationError",
]

# Pytest fixtures need pytest; export them only when it is importable
try:
    from .fixtures import capturing_sink, fresh_registry

    __all__ += ["capturing_sink", "fresh_registry"]
except ImportError:  # pragma: no cover - can't test without pytest
    from typing import Any, Callable

    def _pytest_required(name: str) -> Callable[..., Any]:
        def _raise(*args: Any, **kwargs: Any) -> Any:
            raise ImportError(
                f"'{name}' requires pytest. Install with: pip install streamlog[testing]"
            )

        return _raise

    capturing_sink = _pytest_required("capturing_sink")  # type: ignore[assignment]
    fresh_registry = _pytest_required("fresh_registry")  # type: ignore[assignment]
