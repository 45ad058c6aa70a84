"""
streamlog plugins.

Concrete sinks live in ``streamlog.plugins.sinks``; the registry depends
only on the ``Sink`` protocol defined there.
"""
