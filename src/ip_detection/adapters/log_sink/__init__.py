"""Log sink adapters."""

from ip_detection.adapters.log_sink.file_log_sink import FileLogSink

__all__ = ["FileLogSink"]
