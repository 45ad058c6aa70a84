"""
Internal diagnostics for streamlog.

These are warnings about the library itself (a sink that failed to write, a
stream that was rebound), never user messages. They go to the stdlib logger
``streamlog.diagnostics`` as one compact JSON object per record and are off
unless ``core.internal_logging_enabled`` is set.
"""

from __future__ import annotations

import json
import logging
from typing import Any

_LOGGER_NAME = "streamlog.diagnostics"

# Lazily populated from settings on first use; tests reset it to None.
_internal_logging_enabled: bool | None = None


def _logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def is_enabled() -> bool:
    """Return whether diagnostics are emitted, reading settings once."""
    global _internal_logging_enabled
    if _internal_logging_enabled is None:
        try:
            from .settings import Settings

            _internal_logging_enabled = bool(
                Settings().core.internal_logging_enabled
            )
        except Exception:
            # A broken environment must not break diagnostics
            _internal_logging_enabled = False
    return _internal_logging_enabled


def set_enabled(enabled: bool | None) -> None:
    """Override the cached flag; ``None`` re-reads settings on next use."""
    global _internal_logging_enabled
    _internal_logging_enabled = enabled


def _emit(level: int, component: str, message: str, **fields: Any) -> None:
    if not is_enabled():
        return
    payload: dict[str, Any] = {"component": component, "message": message}
    payload.update(fields)
    _logger().log(level, json.dumps(payload, separators=(",", ":"), default=str))


def debug(component: str, message: str, **fields: Any) -> None:
    _emit(logging.DEBUG, component, message, **fields)


def warn(component: str, message: str, **fields: Any) -> None:
    _emit(logging.WARNING, component, message, **fields)


__all__ = ["debug", "warn", "is_enabled", "set_enabled"]
