"""Outcome of a single log sink append."""

from pydantic import BaseModel, ConfigDict


class LogAppendResult(BaseModel):
    """Status of a best-effort append; ``error`` is set only when ``ok`` is False."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> "LogAppendResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> "LogAppendResult":
        return cls(ok=False, error=reason)
