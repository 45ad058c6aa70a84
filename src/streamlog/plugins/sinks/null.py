from __future__ import annotations


class NullSink:
    """Sink that discards every message."""

    name = "null"

    def emit(self, message: str) -> None:  # noqa: ARG002
        return None


__all__ = ["NullSink"]
