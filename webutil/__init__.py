"""HTTP handler utilities for FastAPI and Starlette applications.

- webutil.params: typed form, query and path parameter accessors
- webutil.shared.errors: HTTP error taxonomy, responders, recovery
- webutil.jsonio: bounded JSON request decoding and response writing
- webutil.request: bearer token and request predicates
- webutil.debug: wire dumps of outgoing requests
"""

from .debug import dump_request_out
from .jsonio import must_read_json, read_json, write_json, write_json_code
from .request import bearer_token, is_get_or_head, is_websocket_upgrade, is_xhr
from .shared.errors import (
    HTTPError,
    recover_html,
    recover_json,
    setup_exception_handlers,
    write_html_error,
    write_json_error,
)

__version__ = "0.1.0"

__all__ = [
    "HTTPError",
    "recover_html",
    "recover_json",
    "setup_exception_handlers",
    "write_html_error",
    "write_json_error",
    "read_json",
    "must_read_json",
    "write_json",
    "write_json_code",
    "bearer_token",
    "is_get_or_head",
    "is_websocket_upgrade",
    "is_xhr",
    "dump_request_out",
]
