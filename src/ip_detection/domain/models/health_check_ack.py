"""Health check acknowledgement domain model."""

from pydantic import BaseModel, ConfigDict

HEALTH_CHECK_IGNORED_MESSAGE = "Health check ignored"


class HealthCheckAck(BaseModel):
    """Minimal body returned to load balancer health probes."""

    model_config = ConfigDict(frozen=True)

    success: bool = True
    message: str = HEALTH_CHECK_IGNORED_MESSAGE
