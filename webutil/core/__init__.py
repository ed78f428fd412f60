"""Core configuration."""

from .config import AppConfig, JSONConfig, LoggingConfig, Settings, get_settings, settings

__all__ = [
    "AppConfig",
    "JSONConfig",
    "LoggingConfig",
    "Settings",
    "get_settings",
    "settings",
]
