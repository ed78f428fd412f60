"""Logger configuration for applications built on webutil.

Library modules log through get_logger(__name__) and never add handlers on
import. Applications call setup_logger() once at startup:

- console: colored, human-readable lines (development)
- json: one JSON object per line, sensitive fields masked (production)

Records from the standard logging module (uvicorn, starlette, fastapi,
httpx) are routed into Loguru so all output shares one format.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TextIO

from loguru import logger

if TYPE_CHECKING:
    from loguru import Message, Record

    from webutil.core.config import Settings

REDACTED = "***REDACTED***"

# Extra fields whose values never reach the logs
SENSITIVE_KEYS = re.compile(
    r"(password|token|secret|authorization|cookie|credential|api_key)",
    re.IGNORECASE,
)

# Bearer credentials inside free-form values, e.g. a dumped request
_BEARER_VALUE = re.compile(r"\bbearer\s+\S+", re.IGNORECASE)

# Standard library loggers taken over by setup_logger, with their levels
STDLIB_LOGGERS: dict[str, int] = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.INFO,
    "starlette": logging.INFO,
    "fastapi": logging.INFO,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Forward standard logging records to Loguru, keeping the caller's location."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.bind(name=record.name).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def redact(extra: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of extra with sensitive values masked.

    Values under sensitive keys are replaced entirely. Bearer credentials
    inside other strings are masked in place. Nested mappings are walked.
    """
    clean: dict[str, Any] = {}
    for key, value in extra.items():
        if SENSITIVE_KEYS.search(str(key)):
            clean[key] = REDACTED
        elif isinstance(value, Mapping):
            clean[key] = redact(value)
        elif isinstance(value, str):
            clean[key] = _BEARER_VALUE.sub(f"Bearer {REDACTED}", value)
        else:
            clean[key] = value
    return clean


def build_log_entry(record: Record, service: str) -> dict[str, Any]:
    """Build the JSON document written for one Loguru record."""
    extra = dict(record["extra"])
    entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "service": service,
        "logger": extra.pop("name", record["name"]),
        "location": f"{record['function']}:{record['line']}",
        "message": record["message"],
    }
    if extra:
        entry["extra"] = redact(extra)

    exception = record["exception"]
    if exception is not None:
        entry["exception"] = {
            "type": exception.type.__name__ if exception.type else None,
            "value": str(exception.value) if exception.value else None,
        }
    return entry


def json_sink(service: str, stream: TextIO | None = None) -> Callable[[Message], None]:
    """Create a sink writing one JSON document per record to stream (stdout by default)."""

    def sink(message: Message) -> None:
        out = stream or sys.stdout
        out.write(json.dumps(build_log_entry(message.record, service), default=str) + "\n")
        out.flush()

    return sink


def intercept_stdlib_logging(quiet_access_log: bool = False) -> None:
    """Route standard logging into Loguru.

    Args:
        quiet_access_log: Raise uvicorn's access log to WARNING
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name, level in STDLIB_LOGGERS.items():
        std_logger = logging.getLogger(name)
        std_logger.handlers.clear()
        std_logger.propagate = True
        if name == "uvicorn.access" and quiet_access_log:
            level = logging.WARNING
        std_logger.setLevel(level)


def setup_logger(settings: Settings | None = None, stream: TextIO | None = None) -> None:
    """Configure Loguru from settings.logging.

    Args:
        settings: Settings to use (the cached settings by default)
        stream: Output stream instead of stdout
    """
    if settings is None:
        from webutil.core.config import get_settings

        settings = get_settings()

    level = settings.logging.level.upper()
    structured = settings.logging.format.lower() == "json"

    logger.remove()
    logger.configure(extra={"name": settings.app.name})

    if structured:
        logger.add(
            json_sink(settings.app.name, stream),
            level=level,
            backtrace=False,
            diagnose=False,  # Locals may hold request data
            enqueue=True,
        )
    else:
        logger.add(
            stream or sys.stdout,
            format=CONSOLE_FORMAT,
            level=level,
            colorize=stream is None,
            backtrace=True,
            diagnose=settings.app.debug,
            enqueue=True,
        )

    intercept_stdlib_logging(quiet_access_log=structured)

    logger.info(
        "Logger configured ({output}, {threshold})",
        output="json" if structured else "console",
        threshold=level,
    )


def get_logger(name: str):
    """Return the Loguru logger bound to a module name.

    Usage:
        logger = get_logger(__name__)
        logger.debug("Reading body")
    """
    return logger.bind(name=name)
