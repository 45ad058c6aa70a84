"""
Dispatch metrics for the stream registry.

Implements a minimal set of Prometheus-compatible counters.

Design goals:
- Thread-safe; the registry calls in from arbitrary threads
- Isolated ``CollectorRegistry`` per collector, nothing registered globally
- Safe no-op export when disabled, while still keeping in-memory counters
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from prometheus_client import CollectorRegistry, Counter


@dataclass
class RegistryMetrics:
    """Captured counters for quick assertions in tests."""

    messages_dispatched: int = 0
    sinks_bound: int = 0
    sinks_replaced: int = 0


class MetricsCollector:
    """Registry-scoped metrics collector.

    When metrics are disabled all export calls are skipped; the in-memory
    counters behind ``snapshot()`` are always maintained.
    """

    def __init__(self, *, enabled: bool = False) -> None:
        self._enabled = bool(enabled)
        self._lock = threading.Lock()
        self._state = RegistryMetrics()

        self._c_dispatched: Any | None = None
        self._c_bound: Any | None = None
        self._c_replaced: Any | None = None
        self._registry: CollectorRegistry | None = None

        if self._enabled:
            self._registry = CollectorRegistry()
            self._c_dispatched = Counter(
                "streamlog_messages_dispatched",
                "Total number of messages handed to a sink",
                ["stream"],
                registry=self._registry,
            )
            self._c_bound = Counter(
                "streamlog_sinks_bound",
                "Total number of add_sink calls",
                registry=self._registry,
            )
            self._c_replaced = Counter(
                "streamlog_sinks_replaced",
                "Total number of bindings that displaced an existing sink",
                registry=self._registry,
            )

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def registry(self) -> CollectorRegistry | None:
        """Expose the isolated Prometheus registry when enabled."""
        return self._registry

    def record_dispatch(self, stream: str) -> None:
        with self._lock:
            self._state.messages_dispatched += 1
        if self._c_dispatched is not None:
            self._c_dispatched.labels(stream=stream).inc()

    def record_bind(self, *, replaced: bool) -> None:
        with self._lock:
            self._state.sinks_bound += 1
            if replaced:
                self._state.sinks_replaced += 1
        if self._c_bound is not None:
            self._c_bound.inc()
        if replaced and self._c_replaced is not None:
            self._c_replaced.inc()

    def snapshot(self) -> RegistryMetrics:
        with self._lock:
            return RegistryMetrics(
                messages_dispatched=self._state.messages_dispatched,
                sinks_bound=self._state.sinks_bound,
                sinks_replaced=self._state.sinks_replaced,
            )


__all__ = ["MetricsCollector", "RegistryMetrics"]
