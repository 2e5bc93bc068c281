"""Diagnostic endpoint that echoes how the server sees a client's network identity."""

__version__ = "0.1.0"
