"""
Exception taxonomy for streamlog.

Dispatch to an unknown stream is deliberately absent from this module: it is
a silent no-op, not an error.
"""

from __future__ import annotations


class StreamlogError(Exception):
    """Base class for errors raised by streamlog itself."""

    pass


class RegistryError(StreamlogError, RuntimeError):
    """Raised when the registry singleton is misused."""

    pass


class InvalidSinkError(StreamlogError, TypeError):
    """Raised when an object that does not satisfy the Sink protocol is bound."""

    def __init__(self, stream: str, sink: object) -> None:
        self.stream = stream
        self.sink_type = type(sink).__name__
        super().__init__(
            f"Cannot bind {self.sink_type!s} to stream {stream!r}: "
            "object has no callable 'emit' method"
        )


__all__ = ["StreamlogError", "RegistryError", "InvalidSinkError"]
