"""Domain layer - request snapshots, probe results and ports."""

from ip_detection.domain.models import (
    HealthCheckAck,
    IdentityProbeResult,
    LogAppendResult,
    RequestHeaderSnapshot,
)
from ip_detection.domain.ports import LogSink, ProbeServer

__all__ = [
    "HealthCheckAck",
    "IdentityProbeResult",
    "LogAppendResult",
    "LogSink",
    "ProbeServer",
    "RequestHeaderSnapshot",
]
