"""Configuration adapters."""

from ip_detection.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
