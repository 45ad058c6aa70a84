"""
Core of streamlog: the stream registry and its ambient support.

Holds the registry singleton, settings, diagnostics and the exception
taxonomy.
"""
