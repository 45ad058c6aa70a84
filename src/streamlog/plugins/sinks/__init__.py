from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Capability contract for a stream destination.

    A sink accepts an opaque text message and emits it somewhere (console,
    file, memory). The registry depends only on this protocol, never on a
    concrete sink type.

    Failures are the sink's own business: an implementation may contain them
    or let them propagate to the caller of ``Registry.print``. Sinks bound
    under several stream names, or used from several threads, must do their
    own locking.
    """

    def emit(self, message: str) -> None:  # noqa: D401
        """Deliver a single message to the sink destination."""
        ...


__all__ = ["Sink"]
