"""Tests for configuration adapter."""

import pytest
from pydantic import ValidationError

from ip_detection.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig(_env_file=None)

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.reload is False
    assert config.log_level == "INFO"
    assert config.ip_log_file == "logs/ip_logs.txt"
    assert config.cors_allowed_origins == ["http://localhost:9000"]
    assert config.cors_allow_credentials is True
    assert config.https_redirect is False
    assert config.proxy_headers is False
    assert config.health_check_user_agents == ["ELB-HealthChecker"]


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("IP_LOG_FILE", "/tmp/probe/ip_logs.txt")
    monkeypatch.setenv("HTTPS_REDIRECT", "true")

    config = AppConfig(_env_file=None)

    assert config.host == "127.0.0.1"
    assert config.port == 9000
    assert config.ip_log_file == "/tmp/probe/ip_logs.txt"
    assert config.https_redirect is True


def test_config_parses_lists_from_json_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given JSON list environment variables, when loading config, then lists are parsed."""
    monkeypatch.setenv(
        "CORS_ALLOWED_ORIGINS", '["https://app.example.com", "http://localhost:9000"]'
    )
    monkeypatch.setenv("HEALTH_CHECK_USER_AGENTS", '["ELB-HealthChecker", "kube-probe"]')

    config = AppConfig(_env_file=None)

    assert config.cors_allowed_origins == ["https://app.example.com", "http://localhost:9000"]
    assert config.health_check_user_agents == ["ELB-HealthChecker", "kube-probe"]


def test_config_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a lower-case log level, when loading config, then it is upper-cased."""
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert AppConfig(_env_file=None).log_level == "DEBUG"


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError, match="log_level must be one of"):
        AppConfig(_env_file=None)


def test_config_rejects_blank_log_file() -> None:
    """Given a blank log file path, when loading config, then validation error is raised."""
    with pytest.raises(ValidationError, match="ip_log_file must not be empty"):
        AppConfig(_env_file=None, ip_log_file="  ")


@pytest.mark.parametrize("markers", ['["ELB-HealthChecker", ""]', '["   "]'])
def test_config_rejects_blank_health_check_marker(
    monkeypatch: pytest.MonkeyPatch, markers: str
) -> None:
    """Given a blank health check marker, when loading config, then validation error is raised."""
    monkeypatch.setenv("HEALTH_CHECK_USER_AGENTS", markers)

    with pytest.raises(ValidationError, match="must not contain blank entries"):
        AppConfig(_env_file=None)


def test_config_accepts_empty_health_check_marker_list(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Given no markers at all, when loading config, then bypass is simply disabled."""
    monkeypatch.setenv("HEALTH_CHECK_USER_AGENTS", "[]")

    assert AppConfig(_env_file=None).health_check_user_agents == []
