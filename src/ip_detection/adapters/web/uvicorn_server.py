"""Uvicorn host for the identity probe application."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

from ip_detection.adapters.config import AppConfig
from ip_detection.domain.ports.probe_server import ProbeServer

if TYPE_CHECKING:
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class UvicornProbeServer(ProbeServer):
    """Serves the probe app with uvicorn."""

    def __init__(self, config: AppConfig, app: ASGIApp) -> None:
        """Initialize the server.

        Args:
            config: Application configuration (bind address and proxy settings).
            app: The ASGI application to serve.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.config = config
        self.app = app
        self._server: uvicorn.Server | None = None

    def build_uvicorn_config(self) -> uvicorn.Config:
        """Translate the application configuration into a uvicorn config."""
        return uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
            proxy_headers=self.config.proxy_headers,
            forwarded_allow_ips=self.config.forwarded_allow_ips,
        )

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        self._server = uvicorn.Server(self.build_uvicorn_config())
        logger.info(f"Serving identity probe on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the web server to exit."""
        if self._server:
            self._server.should_exit = True
