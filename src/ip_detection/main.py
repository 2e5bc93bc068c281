"""Main entry point for the IP detection application."""

import asyncio
import logging
import sys

import uvicorn
from pydantic import ValidationError
from starlette.applications import Starlette

from ip_detection.adapters.config import AppConfig
from ip_detection.adapters.log_sink import FileLogSink
from ip_detection.adapters.web import UvicornProbeServer, create_app
from ip_detection.application.services import IdentityProbeHandler

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure process-wide logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_application(config: AppConfig | None = None) -> Starlette:
    """Wire the log sink, handler and web app together."""
    config = config or AppConfig()
    log_sink = FileLogSink(config.ip_log_file)
    handler = IdentityProbeHandler(
        log_sink,
        health_check_user_agents=config.health_check_user_agents,
    )
    logger.info(f"Client IP log file: {log_sink.path}")
    return create_app(config, handler)


async def main(config: AppConfig) -> None:
    """Main application entry point."""
    server = UvicornProbeServer(config, create_application(config))
    try:
        await server.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await server.stop()


def run() -> None:
    """Console script entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)

    if config.reload:
        # Auto-reload needs an import string so uvicorn can rebuild the app
        uvicorn.run(
            "ip_detection.main:create_application",
            factory=True,
            reload=True,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            proxy_headers=config.proxy_headers,
            forwarded_allow_ips=config.forwarded_allow_ips,
        )
        return

    asyncio.run(main(config))


if __name__ == "__main__":
    run()
