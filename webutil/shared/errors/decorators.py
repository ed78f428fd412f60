"""Recovery decorators for request handlers.

Wrap a handler so that any exception escaping it is rendered as an error
response instead of propagating. This is the single recovery point per
handler invocation; code inside the handler raises freely (e.g. through the
must_* parameter accessors).
"""

from collections.abc import Callable
from functools import wraps
from inspect import iscoroutinefunction
from typing import Any, ParamSpec, TypeVar

from starlette.responses import Response

from .handlers import ErrorWriter, log_error, normalize_error, write_html_error, write_json_error

P = ParamSpec("P")
T = TypeVar("T")


def _recover(writer: ErrorWriter) -> Callable[[Callable[P, T]], Callable[P, T | Response]]:
    def decorator(func: Callable[P, T]) -> Callable[P, T | Response]:
        def _handle_exception(e: Exception) -> Response:
            error = normalize_error(e)
            log_error(error, func.__name__)
            return writer(error)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                try:
                    return await func(*args, **kwargs)  # type: ignore[misc]
                except Exception as e:
                    return _handle_exception(e)

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> T | Response:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                return _handle_exception(e)

        return sync_wrapper

    return decorator


def recover_html(func: Callable[P, T]) -> Callable[P, T | Response]:
    """Render exceptions escaping func as an HTML heading.

    Usage:
        @app.get("/hello")
        @recover_html
        async def hello(request: Request) -> HTMLResponse:
            name = must_query_string(request, "name")
            ...
    """
    return _recover(write_html_error)(func)


def recover_json(func: Callable[P, T]) -> Callable[P, T | Response]:
    """Render exceptions escaping func as the JSON error envelope.

    Usage:
        @app.get("/items/{id}")
        @recover_json
        async def get_item(request: Request) -> Response:
            item_id = must_params_int(request, "id")
            ...
    """
    return _recover(write_json_error)(func)


def recover_with(writer: ErrorWriter) -> Callable[[Callable[P, T]], Callable[P, T | Response]]:
    """Build a recovery decorator around a custom error writer."""
    return _recover(writer)
