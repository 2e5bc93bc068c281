"""Log sink port."""

from typing import Protocol

from ip_detection.domain.models.log_append_result import LogAppendResult


class LogSink(Protocol):
    """Port for appending client identity lines to an append-only destination."""

    def append_line(self, line: str) -> LogAppendResult:
        """Append one line (the sink adds the terminator).

        Implementations must not raise on I/O failure; they report it through
        the returned result instead.
        """
        ...
