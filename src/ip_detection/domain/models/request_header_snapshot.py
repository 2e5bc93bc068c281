"""Request header snapshot domain model."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class RequestHeaderSnapshot(BaseModel):
    """Headers and peer address captured once per inbound request.

    Header values that were sent more than once are collapsed into a single
    string in ``all_headers``. The named fields hold the first value only.
    """

    model_config = ConfigDict(frozen=True)

    all_headers: dict[str, str] = Field(default_factory=dict)
    x_forwarded_for: str | None = None
    host: str | None = None
    x_forwarded_host: str | None = None
    x_forwarded_proto: str | None = None
    x_forwarded_port: str | None = None
    user_agent: str | None = None
    remote_address: str | None = None
    captured_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
