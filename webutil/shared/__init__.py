"""
Shared module - cross-cutting concerns.

- Logging utilities with Loguru
- HTTP error taxonomy and responders (see webutil.shared.errors)
"""

from .logging import get_logger, logger, setup_logger

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
]
