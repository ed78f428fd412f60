"""Error responders.

Turn any error value into an HTML or JSON response. Status codes and
details are discovered through the capability protocols in .base, so the
responders work for the whole taxonomy, for third-party errors exposing a
status_code, and for arbitrary exceptions (rendered as 500).
"""

import html
from collections.abc import Callable
from typing import Literal

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import HTMLResponse, Response

from webutil.core.config import settings
from webutil.jsonio.writer import write_json_code
from webutil.shared.logging import get_logger

from .base import HasErrorDetails, HasStatusCode, HTTPError, error_class_for_status, status_text
from .domain import UnprocessableEntityError
from .schemas import ErrorBody, ErrorResponse

logger = get_logger(__name__)

ErrorWriter = Callable[[object], Response]


def status_code_of(err: object) -> int:
    """Return the status code exposed by err, or 500."""
    if isinstance(err, HasStatusCode) and isinstance(err.status_code, int):
        return err.status_code
    return 500


def details_of(err: object) -> list[str]:
    """Return the details exposed by err, or an empty list."""
    if isinstance(err, HasErrorDetails) and isinstance(err.details, list | tuple):
        return [str(d) for d in err.details]
    return []


def build_error_response(err: object) -> ErrorResponse:
    """Build the JSON error envelope for err."""
    return ErrorResponse(
        error=ErrorBody(
            code=status_code_of(err),
            message=str(err),
            details=details_of(err) or None,
        )
    )


def _headers_of(err: object) -> dict[str, str] | None:
    headers = getattr(err, "headers", None)
    return dict(headers) if headers else None


def write_html_error(err: object) -> HTMLResponse:
    """Render err as a single HTML heading with the resolved status code."""
    return HTMLResponse(
        f"<h1>{html.escape(str(err), quote=False)}</h1>",
        status_code=status_code_of(err),
        headers=_headers_of(err),
    )


def write_json_error(err: object) -> Response:
    """Render err as the JSON error envelope with the resolved status code.

    Example body:

        {
          "error": {
            "code": 422,
            "message": "Unprocessable Entity",
            "details": ["A was bad", "B is missing"]
          }
        }
    """
    response = build_error_response(err)
    return write_json_code(
        response.error.code,
        response.to_content(),
        headers=_headers_of(err),
    )


def from_starlette_exception(exc: StarletteHTTPException) -> object:
    """Translate a Starlette HTTPException into the matching error kind.

    The detail becomes the message unless it is just the reason phrase.
    Codes without a kind are returned unchanged.
    """
    cls = error_class_for_status(exc.status_code)
    if cls is None:
        return exc
    detail = exc.detail if isinstance(exc.detail, str) else ""
    message = "" if detail == status_text(exc.status_code) else detail
    error = cls(message, err=exc)
    if exc.headers:
        error.headers = exc.headers
    return error


def from_validation_error(exc: RequestValidationError) -> UnprocessableEntityError:
    """Translate FastAPI request validation errors into a 422 with details."""
    details = []
    for item in exc.errors():
        loc = ".".join(str(part) for part in item.get("loc", ()))
        details.append(f"{loc}: {item.get('msg', '')}" if loc else str(item.get("msg", "")))
    return UnprocessableEntityError(details=details, err=exc)


def normalize_error(err: object) -> object:
    """Map host runtime exceptions onto the taxonomy; leave everything else as is."""
    if isinstance(err, StarletteHTTPException):
        return from_starlette_exception(err)
    if isinstance(err, RequestValidationError):
        return from_validation_error(err)
    return err


def log_error(err: object, where: str = "") -> None:
    """Log an error about to be rendered.

    Server errors are logged with traceback, client errors at debug level.
    """
    code = status_code_of(err)
    suffix = f" in {where}" if where else ""
    if code >= 500:
        exc = err if isinstance(err, BaseException) else None
        logger.opt(exception=exc).error(f"Unhandled error{suffix}: {err!r}")
    else:
        logger.debug(f"Client error{suffix}: {code} {err}")


def get_error_writer(error_format: Literal["json", "html"] | str | None = None) -> ErrorWriter:
    """Return the responder for the given format (settings.app.error_format by default)."""
    fmt = (error_format or settings.app.error_format).lower()
    if fmt == "html":
        return write_html_error
    if fmt == "json":
        return write_json_error
    raise ValueError(f"Unknown error format: {fmt!r}")


def setup_exception_handlers(
    app: FastAPI,
    error_format: Literal["json", "html"] | str | None = None,
) -> None:
    """Register exception handlers in a FastAPI application.

    Registers handlers for:
    - Taxonomy errors (HTTPError)
    - Starlette/FastAPI HTTP exceptions, mapped onto the taxonomy
    - Request validation errors, mapped onto UnprocessableEntityError
    - Unexpected exceptions (rendered as 500)

    Args:
        app: FastAPI application instance
        error_format: "json" or "html"; defaults to settings.app.error_format
    """
    writer = get_error_writer(error_format)

    @app.exception_handler(HTTPError)
    async def http_error_handler(request: Request, exc: HTTPError) -> Response:
        log_error(exc, request.url.path)
        return writer(exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
        error = normalize_error(exc)
        log_error(error, request.url.path)
        return writer(error)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        error = normalize_error(exc)
        log_error(error, request.url.path)
        return writer(error)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
        """Last line of defense: anything else becomes a 500."""
        log_error(exc, request.url.path)
        return writer(exc)


# Alias for backwards compatibility
register_exception_handlers = setup_exception_handlers
