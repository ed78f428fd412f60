"""JSON request body decoding."""

from __future__ import annotations

import json
from contextlib import aclosing
from typing import Any

from pydantic import BaseModel
from starlette.requests import Request

from webutil.core.config import settings
from webutil.shared.errors.domain import BadRequestError
from webutil.shared.logging import get_logger

from .pool import BufferPool, default_pool

logger = get_logger(__name__)

_decoder = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


class InvalidJSONError(ValueError):
    """The request body could not be decoded.

    The text embeds both the underlying error and the bytes that were read,
    for diagnostics.
    """

    def __init__(self, cause: Exception, data: bytes) -> None:
        self.cause = cause
        self.data = data
        super().__init__(
            f"invalid JSON data: {cause}, on input: {data.decode('utf-8', errors='replace')}"
        )


def _decode_first_value(data: bytes) -> Any:
    """Decode the first JSON value in data, ignoring anything after it."""
    text = data.decode("utf-8")
    start = len(text) - len(text.lstrip(_WHITESPACE))
    value, _ = _decoder.raw_decode(text, start)
    return value


async def read_json(
    request: Request,
    model: type[BaseModel] | None = None,
    *,
    pool: BufferPool | None = None,
    max_bytes: int | None = None,
) -> Any:
    """Decode the JSON body of request.

    At most max_bytes (8 MiB by default) are read; a longer body is cut off
    at the limit and will usually fail to decode. When model is given, the
    decoded value is validated into an instance of it.

    Args:
        request: Incoming request
        model: Optional pydantic model class to validate into
        pool: Scratch buffer pool (defaults to the process-wide pool)
        max_bytes: Read limit overriding settings.json.max_body_bytes

    Returns:
        The decoded value, or a model instance when model is given

    Raises:
        InvalidJSONError: If the body is not valid JSON or fails validation
    """
    pool = pool or default_pool
    limit = settings.json.max_body_bytes if max_bytes is None else max_bytes

    with pool.acquire() as buf:
        async with aclosing(request.stream()) as stream:
            async for chunk in stream:
                remaining = limit - len(buf)
                if remaining <= 0:
                    break
                buf.extend(chunk[:remaining])

        data = bytes(buf)
        try:
            value = _decode_first_value(data)
            if model is not None:
                value = model.model_validate(value)
        except (ValueError, RecursionError) as exc:
            # json, unicode and pydantic validation errors are all ValueErrors;
            # deeply nested documents exhaust the decoder stack
            raise InvalidJSONError(exc, data) from exc

    return value


async def must_read_json(
    request: Request,
    model: type[BaseModel] | None = None,
    *,
    pool: BufferPool | None = None,
    max_bytes: int | None = None,
) -> Any:
    """Like read_json, but raises BadRequestError("Invalid JSON data") on failure."""
    try:
        return await read_json(request, model, pool=pool, max_bytes=max_bytes)
    except InvalidJSONError as exc:
        raise BadRequestError("Invalid JSON data", err=exc) from exc


def close_body(body: Any) -> None:
    """Close body if it is set, ignoring errors from close()."""
    if body is None:
        return
    try:
        body.close()
    except Exception as exc:
        logger.debug(f"Ignoring error while closing body: {exc!r}")
