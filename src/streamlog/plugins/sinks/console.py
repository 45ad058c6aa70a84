from __future__ import annotations

import sys
import threading
from typing import Literal, TextIO

from ...core import diagnostics


class ConsoleSink:
    """Sink that writes each message as one line to stdout or stderr.

    - The target stream is looked up at emit time, so redirected or captured
      ``sys.stdout``/``sys.stderr`` are honoured
    - Flushes after every line unless ``flush=False``
    - Never raises upstream; write errors are reported through diagnostics
    """

    name = "console"

    def __init__(
        self,
        *,
        target: Literal["stdout", "stderr"] = "stdout",
        flush: bool = True,
    ) -> None:
        if target not in ("stdout", "stderr"):
            raise ValueError(f"target must be 'stdout' or 'stderr', got {target!r}")
        self._target = target
        self._flush = flush
        self._lock = threading.Lock()

    @property
    def target(self) -> str:
        return self._target

    def _stream(self) -> TextIO:
        return sys.stdout if self._target == "stdout" else sys.stderr

    def emit(self, message: str) -> None:
        try:
            with self._lock:
                stream = self._stream()
                stream.write(f"{message}\n")
                if self._flush:
                    stream.flush()
        except (OSError, ValueError) as e:
            # Closed or broken console; contain
            diagnostics.warn(
                "sink",
                "console write failed",
                sink=self.name,
                target=self._target,
                reason=type(e).__name__,
                detail=str(e),
            )


__all__ = ["ConsoleSink"]
