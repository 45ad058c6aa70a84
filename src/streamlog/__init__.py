"""
Public entrypoints for streamlog.

A process-wide registry that routes messages on named streams to pluggable
sinks:

```python
from streamlog import Registry
from streamlog.plugins.sinks.console import ConsoleSink

Registry.instance().add_sink("cout", ConsoleSink())
Registry.instance().print("cout", "Hello World")
```

Or wire the built-in sinks from ``STREAMLOG_*`` environment variables with
``configure()``.
"""

from __future__ import annotations

from .core.bootstrap import configure
from .core.errors import InvalidSinkError, RegistryError, StreamlogError
from .core.registry import Registry, get_registry
from .core.settings import Settings
from .plugins.sinks import Sink

__all__ = [
    "Registry",
    "get_registry",
    "configure",
    "Settings",
    "Sink",
    "StreamlogError",
    "RegistryError",
    "InvalidSinkError",
    "__version__",
    "VERSION",
]

__version__ = "0.1.0"
VERSION = __version__
