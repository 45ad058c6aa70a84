"""
Process-wide stream registry.

The registry maps stream names to sinks and dispatches messages by name.
There is exactly one registry per process, created lazily on the first
``Registry.instance()`` call:

    from streamlog import Registry
    from streamlog.plugins.sinks.console import ConsoleSink

    Registry.instance().add_sink("cout", ConsoleSink())
    Registry.instance().print("cout", "Hello World")

Printing to a stream that has no sink is a silent no-op.
"""

from __future__ import annotations

import threading
from typing import ClassVar

from ..metrics.metrics import MetricsCollector
from ..plugins.sinks import Sink
from . import diagnostics
from .errors import InvalidSinkError, RegistryError

# Only Registry.instance() holds this; direct construction is rejected.
_CONSTRUCTION_KEY = object()


class _RegistryState:
    """Implementation state hidden behind the public Registry."""

    __slots__ = ("lock", "metrics", "sinks")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.sinks: dict[str, Sink] = {}
        self.metrics = MetricsCollector(enabled=False)


class Registry:
    """Singleton mapping of stream name to sink.

    All access to the mapping is serialised by an internal lock. Sinks are
    called after that lock is released, so a slow sink only delays its own
    callers; sinks shared between streams or threads lock for themselves.
    """

    _instance: ClassVar[Registry | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, *, _key: object = None) -> None:
        if _key is not _CONSTRUCTION_KEY:
            raise RegistryError(
                "Registry is a singleton; use Registry.instance() instead"
            )
        self._state = _RegistryState()

    @classmethod
    def instance(cls) -> Registry:
        """Return the process-wide registry, creating it on first call."""
        registry = Registry._instance
        if registry is None:
            with Registry._instance_lock:
                registry = Registry._instance
                if registry is None:
                    registry = cls._create()
                    Registry._instance = registry
        return registry

    @classmethod
    def _create(cls) -> Registry:
        return cls(_key=_CONSTRUCTION_KEY)

    @classmethod
    def _reset_instance(cls) -> None:
        """Drop the singleton so the next ``instance()`` builds a new one.

        Warning:
            This function is for testing purposes only. Do not use in
            production code.
        """
        with Registry._instance_lock:
            Registry._instance = None

    def add_sink(self, name: str, sink: Sink) -> None:
        """Bind ``sink`` to stream ``name``.

        An existing binding for ``name`` is replaced; the displaced sink is
        not notified. The same sink may be bound under several names.

        Raises:
            TypeError: If ``name`` is not a string
            InvalidSinkError: If ``sink`` has no callable ``emit``
        """
        if not isinstance(name, str):
            raise TypeError(
                f"stream name must be str, got {type(name).__name__}"
            )
        if not isinstance(sink, Sink) or not callable(getattr(sink, "emit", None)):
            raise InvalidSinkError(name, sink)

        state = self._state
        with state.lock:
            previous = state.sinks.get(name)
            state.sinks[name] = sink
            metrics = state.metrics

        replaced = previous is not None and previous is not sink
        metrics.record_bind(replaced=replaced)
        if replaced:
            diagnostics.debug(
                "registry",
                "stream rebound to a different sink",
                stream=name,
                previous=type(previous).__name__,
                current=type(sink).__name__,
            )

    def print(self, name: str, message: str) -> None:
        """Send ``message`` to the sink bound to ``name``, if any.

        Unknown streams are ignored without raising or reporting. Errors
        raised by the sink propagate unchanged.
        """
        state = self._state
        with state.lock:
            sink = state.sinks.get(name)
            metrics = state.metrics
        if sink is None:
            return
        sink.emit(message)
        metrics.record_dispatch(name)

    def get_sink(self, name: str) -> Sink | None:
        with self._state.lock:
            return self._state.sinks.get(name)

    def streams(self) -> list[str]:
        """Sorted snapshot of the bound stream names."""
        with self._state.lock:
            return sorted(self._state.sinks)

    @property
    def metrics(self) -> MetricsCollector:
        with self._state.lock:
            return self._state.metrics

    def attach_metrics(self, collector: MetricsCollector) -> None:
        with self._state.lock:
            self._state.metrics = collector

    def __repr__(self) -> str:
        return f"<Registry streams={self.streams()!r}>"


def get_registry() -> Registry:
    """Shorthand for ``Registry.instance()``."""
    return Registry.instance()


__all__ = ["Registry", "get_registry"]
