"""Identity probe service.

Resolves the caller's apparent IP from a request snapshot, skips load
balancer health probes, appends one line per request to the log sink and
builds the response payload.

The left-most ``X-Forwarded-For`` entry is taken at face value. There is no
trusted-proxy filtering and no IP syntax validation, so the value can be
spoofed by any client. Use the result for diagnostics only.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from ip_detection.domain.models.health_check_ack import HealthCheckAck
from ip_detection.domain.models.identity_probe_result import IdentityProbeResult
from ip_detection.domain.models.request_header_snapshot import RequestHeaderSnapshot
from ip_detection.domain.ports.log_sink import LogSink

logger = logging.getLogger(__name__)

# AWS Application Load Balancer probes send "User-Agent: ELB-HealthChecker/2.0"
DEFAULT_HEALTH_CHECK_USER_AGENTS: tuple[str, ...] = ("ELB-HealthChecker",)

LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_client_ip(x_forwarded_for: str | None, remote_address: str | None) -> str | None:
    """Resolve the client IP from X-Forwarded-For, falling back to the peer address.

    X-Forwarded-For may contain a list: client, proxy1, proxy2, ...
    """
    if x_forwarded_for is not None:
        candidate = x_forwarded_for.split(",")[0].strip()
        if candidate:
            return candidate
    return remote_address


def is_health_check(user_agent: str | None, markers: Iterable[str]) -> bool:
    """Return True when the User-Agent contains any health check marker (case-sensitive)."""
    if not user_agent:
        return False
    return any(marker in user_agent for marker in markers)


def format_log_line(
    captured_at: datetime,
    client_ip: str | None,
    host: str | None,
    x_forwarded_host: str | None,
    user_agent: str | None,
) -> str:
    """Format one log line; absent values render as empty strings."""
    timestamp = captured_at.strftime(LOG_TIMESTAMP_FORMAT)
    return (
        f"{timestamp} | IP: {client_ip or ''} | Host: {host or ''} "
        f"| XFH: {x_forwarded_host or ''} | UA: {user_agent or ''}"
    )


class IdentityProbeHandler:
    """Handles a single identity probe request."""

    def __init__(
        self,
        log_sink: LogSink,
        health_check_user_agents: Iterable[str] = DEFAULT_HEALTH_CHECK_USER_AGENTS,
    ) -> None:
        """Initialize the handler.

        Args:
            log_sink: Destination for one line per non-health-check request.
            health_check_user_agents: User-Agent substrings that mark health probes.
        """
        self._log_sink = log_sink
        self._health_check_user_agents = tuple(health_check_user_agents)

    def handle(self, snapshot: RequestHeaderSnapshot) -> IdentityProbeResult | HealthCheckAck:
        """Resolve the client identity, log it and build the response payload."""
        if is_health_check(snapshot.user_agent, self._health_check_user_agents):
            return HealthCheckAck()

        client_ip = resolve_client_ip(snapshot.x_forwarded_for, snapshot.remote_address)

        log_line = format_log_line(
            snapshot.captured_at,
            client_ip,
            snapshot.host,
            snapshot.x_forwarded_host,
            snapshot.user_agent,
        )
        result = self._log_sink.append_line(log_line)
        if not result.ok:
            # The probe answer does not depend on the log write
            logger.error(f"Error writing IP log line: {result.error}")

        return IdentityProbeResult(
            client_ip=client_ip,
            x_forwarded_for_full=snapshot.x_forwarded_for,
            host=snapshot.host,
            x_forwarded_host=snapshot.x_forwarded_host,
            x_forwarded_proto=snapshot.x_forwarded_proto,
            x_forwarded_port=snapshot.x_forwarded_port,
            user_agent=snapshot.user_agent,
            remote_address=snapshot.remote_address,
            all_headers=snapshot.all_headers,
            timestamp=snapshot.captured_at,
        )
