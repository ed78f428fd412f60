"""Shared logging configuration.

Loguru-based logging module with:
- Structured JSON logging for production
- Colored console output for development
- Sensitive field redaction
"""

from loguru import logger

from .config import (
    InterceptHandler,
    build_log_entry,
    get_logger,
    intercept_stdlib_logging,
    json_sink,
    redact,
    setup_logger,
)

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
    "build_log_entry",
    "json_sink",
    "redact",
    "InterceptHandler",
    "intercept_stdlib_logging",
]
