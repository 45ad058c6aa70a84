"""
Settings-driven wiring of the built-in sinks onto the registry.
"""

from __future__ import annotations

from ..metrics.metrics import MetricsCollector
from ..plugins.sinks.console import ConsoleSink
from ..plugins.sinks.file import FileSink
from . import diagnostics
from .registry import Registry
from .settings import Settings


def configure(settings: Settings | None = None) -> Registry:
    """Bind the sinks described by ``settings`` and return the registry.

    @docs:examples
    ```python
    from streamlog import configure

    registry = configure()  # reads STREAMLOG_* environment variables
    registry.print("cout", "Hello World")
    ```

    @docs:notes
    - The console sink is bound under ``console.stream`` (default ``"cout"``)
    - The file sink is bound under ``file.stream`` only when ``file.path`` is set
    - Calling again rebinds the configured streams; other streams are untouched
    - A file sink displaced by a rebind is closed
    """
    cfg = settings or Settings()
    diagnostics.set_enabled(cfg.core.internal_logging_enabled)

    registry = Registry.instance()
    if cfg.core.enable_metrics and not registry.metrics.is_enabled:
        registry.attach_metrics(MetricsCollector(enabled=True))

    if cfg.console.stream is not None:
        registry.add_sink(
            cfg.console.stream,
            ConsoleSink(target=cfg.console.target, flush=cfg.console.flush),
        )

    if cfg.file.path is not None:
        previous = registry.get_sink(cfg.file.stream)
        sink = FileSink(
            cfg.file.path,
            encoding=cfg.file.encoding,
            create_dirs=cfg.file.create_dirs,
            strict=cfg.file.strict,
        )
        registry.add_sink(cfg.file.stream, sink)
        # The registry never notifies displaced sinks; release the handle here
        if isinstance(previous, FileSink) and previous is not sink:
            previous.close()
    return registry


__all__ = ["configure"]
