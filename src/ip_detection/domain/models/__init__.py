"""Domain models for the identity probe."""

from ip_detection.domain.models.health_check_ack import HealthCheckAck
from ip_detection.domain.models.identity_probe_result import IdentityProbeResult
from ip_detection.domain.models.log_append_result import LogAppendResult
from ip_detection.domain.models.request_header_snapshot import RequestHeaderSnapshot

__all__ = [
    "HealthCheckAck",
    "IdentityProbeResult",
    "LogAppendResult",
    "RequestHeaderSnapshot",
]
