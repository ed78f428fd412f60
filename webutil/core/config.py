"""
Library configuration.
Every value can be overridden through environment variables or a .env file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class JSONConfig(BaseSettings):
    """JSON body decoding and response writing."""

    model_config = SettingsConfigDict(env_prefix="JSON_", env_file=".env", extra="ignore")

    # Upper bound for request bodies read by read_json (8 MiB)
    max_body_bytes: int = 8 << 20
    # Indentation of JSON responses
    indent: int = 2
    # Number of idle scratch buffers kept by the default pool
    pool_max_idle: int = 64


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    # "console" for development, "json" for production
    format: str = "console"


class AppConfig(BaseSettings):
    """General configuration."""

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    name: str = "webutil"
    debug: bool = False
    # Renderer used by setup_exception_handlers: "json" or "html"
    error_format: str = "json"


class Settings:
    """Aggregates all configuration sections."""

    def __init__(self) -> None:
        self.json = JSONConfig()
        self.logging = LoggingConfig()
        self.app = AppConfig()


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton."""
    return Settings()


settings = get_settings()
