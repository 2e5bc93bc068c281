"""Adapters layer - configuration, log sink and web host integrations."""

from ip_detection.adapters.config import AppConfig
from ip_detection.adapters.log_sink import FileLogSink

__all__ = [
    "AppConfig",
    "FileLogSink",
]
