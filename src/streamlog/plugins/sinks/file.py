from __future__ import annotations

import threading
import types
from pathlib import Path
from typing import TextIO

from ...core import diagnostics


class FileSink:
    """Append-only text file sink.

    The file is opened lazily in append mode on the first message and each
    message is written as one line. Writes are serialised, so a single
    instance can be shared between streams and threads.

    With ``strict=False`` (the default) I/O errors are contained and reported
    through diagnostics. With ``strict=True`` they propagate to the caller.
    """

    name = "file"

    def __init__(
        self,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        create_dirs: bool = True,
        strict: bool = False,
    ) -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._create_dirs = create_dirs
        self._strict = strict
        self._lock = threading.Lock()
        self._fh: TextIO | None = None
        self._closed = False

    @property
    def path(self) -> Path:
        return self._path

    def _open(self) -> TextIO:
        if self._create_dirs:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        return self._path.open("a", encoding=self._encoding)

    def emit(self, message: str) -> None:
        try:
            with self._lock:
                if self._closed:
                    raise ValueError(f"write to closed file sink: {self._path}")
                if self._fh is None:
                    self._fh = self._open()
                self._fh.write(f"{message}\n")
                self._fh.flush()
        except (OSError, ValueError) as e:
            if self._strict:
                raise
            diagnostics.warn(
                "sink",
                "file write failed",
                sink=self.name,
                path=str(self._path),
                reason=type(e).__name__,
                detail=str(e),
            )

    def close(self) -> None:
        """Close the underlying file; later emits count as failures."""
        with self._lock:
            self._closed = True
            if self._fh is not None:
                fh, self._fh = self._fh, None
                fh.close()

    def __enter__(self) -> FileSink:
        return self

    def __exit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc: BaseException | None,
        _tb: types.TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["FileSink"]
