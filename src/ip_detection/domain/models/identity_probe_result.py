"""Identity probe result domain model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IdentityProbeResult(BaseModel):
    """Response payload describing how the server perceived the caller.

    Serialise with ``model_dump(by_alias=True, mode="json")`` to get the
    camelCase wire names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool = True
    client_ip: str | None = Field(default=None, alias="clientIP")
    x_forwarded_for_full: str | None = Field(default=None, alias="xForwardedForFull")
    host: str | None = None
    x_forwarded_host: str | None = Field(default=None, alias="xForwardedHost")
    x_forwarded_proto: str | None = Field(default=None, alias="xForwardedProto")
    x_forwarded_port: str | None = Field(default=None, alias="xForwardedPort")
    user_agent: str | None = Field(default=None, alias="userAgent")
    remote_address: str | None = Field(default=None, alias="remoteAddress")
    all_headers: dict[str, str] = Field(default_factory=dict, alias="allHeaders")
    timestamp: datetime
