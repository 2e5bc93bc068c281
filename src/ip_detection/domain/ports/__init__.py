"""Ports (interfaces) for the ports-and-adapters architecture."""

from ip_detection.domain.ports.log_sink import LogSink
from ip_detection.domain.ports.probe_server import ProbeServer

__all__ = [
    "LogSink",
    "ProbeServer",
]
