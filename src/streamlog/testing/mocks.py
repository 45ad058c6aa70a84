"""
In-memory sinks for asserting on dispatched messages.
"""

from __future__ import annotations

import threading


class CapturingSink:
    """Sink that records every emitted message in order.

    Safe to share between streams and threads; ``messages`` returns a copy.
    """

    def __init__(self, name: str = "capturing") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._messages: list[str] = []

    def emit(self, message: str) -> None:
        with self._lock:
            self._messages.append(message)

    @property
    def messages(self) -> list[str]:
        with self._lock:
            return list(self._messages)

    def clear(self) -> None:
        with self._lock:
            self._messages.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)


__all__ = ["CapturingSink"]
