"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    log_level: str = Field(default="INFO", description="Process log level (DEBUG, INFO, ...)")

    # Client IP log sink
    ip_log_file: str = Field(
        default="logs/ip_logs.txt",
        description="Path of the append-only client IP log file",
    )

    # CORS configuration
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:9000"],
        description="Origins allowed to call the probe from a browser (JSON list)",
    )
    cors_allow_credentials: bool = Field(
        default=True,
        description="Allow cookies and credentials on cross-origin requests",
    )

    # HTTPS redirection (TLS normally terminates at the load balancer)
    https_redirect: bool = Field(
        default=False,
        description="Redirect plain HTTP requests to HTTPS",
    )

    # Host-level forwarded header normalization (uvicorn)
    proxy_headers: bool = Field(
        default=False,
        description="Let uvicorn rewrite the peer address from X-Forwarded-* headers",
    )
    forwarded_allow_ips: str = Field(
        default="127.0.0.1",
        description="Comma separated proxy addresses uvicorn trusts when proxy_headers is on",
    )

    # Health check bypass
    health_check_user_agents: list[str] = Field(
        default=["ELB-HealthChecker"],
        description="User-Agent substrings identifying health probes that are not logged",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("ip_log_file")
    @classmethod
    def validate_ip_log_file(cls, v: str) -> str:
        """Validate the log file path is not blank."""
        if not v.strip():
            raise ValueError("ip_log_file must not be empty")
        return v

    @field_validator("health_check_user_agents")
    @classmethod
    def validate_health_check_user_agents(cls, v: list[str]) -> list[str]:
        """Validate health check markers are not blank (a blank marker matches every request)."""
        if any(not marker.strip() for marker in v):
            raise ValueError("health_check_user_agents must not contain blank entries")
        return v
