"""Tests for the uvicorn probe server adapter."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from ip_detection.adapters.config import AppConfig
from ip_detection.adapters.web import UvicornProbeServer


def test_when_building_config_then_uses_app_settings() -> None:
    """Given app settings, when building uvicorn config, then bind and proxy options match."""
    app = MagicMock()
    config = AppConfig(
        _env_file=None,
        host="127.0.0.1",
        port=9001,
        log_level="WARNING",
        proxy_headers=True,
        forwarded_allow_ips="10.0.0.0/8",
    )
    server = UvicornProbeServer(config, app)

    uvicorn_config = server.build_uvicorn_config()

    assert uvicorn_config.app is app
    assert uvicorn_config.host == "127.0.0.1"
    assert uvicorn_config.port == 9001
    assert uvicorn_config.log_level == "warning"
    assert uvicorn_config.proxy_headers is True
    assert uvicorn_config.forwarded_allow_ips == "10.0.0.0/8"


def test_when_config_has_wrong_type_then_raises() -> None:
    """Given a non-AppConfig config, when constructing, then TypeError is raised."""
    with pytest.raises(TypeError, match="config must be an AppConfig"):
        UvicornProbeServer(MagicMock(), MagicMock())


@pytest.mark.asyncio
async def test_when_started_then_serves_with_uvicorn() -> None:
    """Given a server, when starting, then a uvicorn Server is created and served."""
    server = UvicornProbeServer(AppConfig(_env_file=None), MagicMock())

    with patch("ip_detection.adapters.web.uvicorn_server.uvicorn.Server") as server_cls:
        server_cls.return_value.serve = AsyncMock()
        await server.start()

    server_cls.assert_called_once()
    server_cls.return_value.serve.assert_awaited_once()


@pytest.mark.asyncio
async def test_when_stopped_then_asks_uvicorn_to_exit() -> None:
    """Given a started server, when stopping, then should_exit is set."""
    server = UvicornProbeServer(AppConfig(_env_file=None), MagicMock())

    with patch("ip_detection.adapters.web.uvicorn_server.uvicorn.Server") as server_cls:
        server_cls.return_value.serve = AsyncMock()
        server_cls.return_value.should_exit = False
        await server.start()
        await server.stop()

    assert server_cls.return_value.should_exit is True


@pytest.mark.asyncio
async def test_when_stopped_before_start_then_does_nothing() -> None:
    """Given a server that never started, when stopping, then no error is raised."""
    server = UvicornProbeServer(AppConfig(_env_file=None), MagicMock())

    await server.stop()
