"""Build request header snapshots from Starlette requests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ip_detection.domain.models.request_header_snapshot import RequestHeaderSnapshot

if TYPE_CHECKING:
    from starlette.datastructures import Headers
    from starlette.requests import Request

MULTI_VALUE_SEPARATOR = ","


def _first_value(headers: Headers, name: str) -> str | None:
    """Return the first value sent for a header, or None when absent."""
    values = headers.getlist(name)
    return values[0] if values else None


def _collapse_headers(headers: Headers) -> dict[str, str]:
    """Collapse repeated headers into one comma joined string per name."""
    collapsed: dict[str, str] = {}
    for name, value in headers.items():
        if name in collapsed:
            collapsed[name] = f"{collapsed[name]}{MULTI_VALUE_SEPARATOR}{value}"
        else:
            collapsed[name] = value
    return collapsed


def snapshot_from_request(request: Request, now: datetime | None = None) -> RequestHeaderSnapshot:
    """Capture headers and peer address of a request exactly once.

    Args:
        request: The inbound Starlette request.
        now: Capture instant; defaults to the current UTC time.
    """
    headers = request.headers
    remote_address = None
    if request.client and request.client.host:
        remote_address = request.client.host

    return RequestHeaderSnapshot(
        all_headers=_collapse_headers(headers),
        x_forwarded_for=_first_value(headers, "X-Forwarded-For"),
        host=_first_value(headers, "Host"),
        x_forwarded_host=_first_value(headers, "X-Forwarded-Host"),
        x_forwarded_proto=_first_value(headers, "X-Forwarded-Proto"),
        x_forwarded_port=_first_value(headers, "X-Forwarded-Port"),
        user_agent=_first_value(headers, "User-Agent"),
        remote_address=remote_address,
        captured_at=now or datetime.now(UTC),
    )
