"""Application services (use cases) for the identity probe."""

from ip_detection.application.services.identity_probe_service import (
    DEFAULT_HEALTH_CHECK_USER_AGENTS,
    IdentityProbeHandler,
    format_log_line,
    is_health_check,
    resolve_client_ip,
)

__all__ = [
    "DEFAULT_HEALTH_CHECK_USER_AGENTS",
    "IdentityProbeHandler",
    "format_log_line",
    "is_health_check",
    "resolve_client_ip",
]
