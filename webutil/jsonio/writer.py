"""JSON response writing."""

from __future__ import annotations

import json
from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from webutil.core.config import settings
from webutil.shared.logging import get_logger

logger = get_logger(__name__)


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with indentation and a trailing newline.

    Content that cannot be serialized (NaN, infinities, unknown types) is
    logged and leaves the body empty apart from the newline; the status code
    and headers are kept.
    """

    def render(self, content: Any) -> bytes:
        try:
            text = json.dumps(
                content,
                ensure_ascii=False,
                allow_nan=False,
                indent=settings.json.indent,
            )
        except (TypeError, ValueError) as exc:
            logger.warning("Cannot serialize JSON response: {}", exc)
            text = ""
        return (text + "\n").encode("utf-8")


def write_json(data: Any) -> IndentedJSONResponse:
    """Serialize data as JSON with HTTP status 200."""
    return write_json_code(200, data)


def write_json_code(
    code: int, data: Any, headers: dict[str, str] | None = None
) -> IndentedJSONResponse:
    """Serialize data as JSON with the given HTTP status code.

    data may be anything FastAPI's jsonable_encoder accepts: dicts, lists,
    pydantic models, dataclasses, datetimes and so on.
    """
    return IndentedJSONResponse(
        content=jsonable_encoder(data),
        status_code=code,
        headers=headers,
    )
