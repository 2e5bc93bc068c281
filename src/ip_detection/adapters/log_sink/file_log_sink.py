"""Append-only UTF-8 file log sink."""

from __future__ import annotations

import logging
from pathlib import Path

from ip_detection.domain.models.log_append_result import LogAppendResult
from ip_detection.domain.ports.log_sink import LogSink

logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


class FileLogSink(LogSink):
    """Appends newline-terminated lines to a text file.

    Each line is written with a single ``write`` on a file opened in append
    mode, so concurrent appends from other requests do not interleave
    partial lines. Failures are reported through the returned result and are
    never retried.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the destination file path."""
        self.path = Path(path)

    def append_line(self, line: str) -> LogAppendResult:
        """Append ``line`` plus a line terminator, encoded as UTF-8."""
        data = (line + LINE_TERMINATOR).encode("utf-8")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "ab") as f:
                f.write(data)
        except OSError as e:
            return LogAppendResult.failure(f"{self.path}: {e}")
        logger.debug(f"Appended {len(data)} bytes to {self.path}")
        return LogAppendResult.success()
