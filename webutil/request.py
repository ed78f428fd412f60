"""Request predicates and header helpers."""

from starlette.requests import HTTPConnection, Request

_BEARER_PREFIX = "bearer "


def bearer_token(conn: HTTPConnection) -> tuple[str, bool]:
    """Extract the Bearer token from the Authorization header.

    The scheme is matched case-insensitively; the token is returned verbatim.

    Returns:
        (token, True) if a non-empty Bearer token is present, ("", False) otherwise
    """
    auth = conn.headers.get("authorization", "")
    if not auth.lower().startswith(_BEARER_PREFIX):
        return "", False
    token = auth[len(_BEARER_PREFIX):]
    if token == "":
        return "", False
    return token, True


def is_get_or_head(request: Request) -> bool:
    """Return True if request is a GET or HEAD request."""
    return request.method in ("GET", "HEAD")


def is_websocket_upgrade(request: Request) -> bool:
    """Return True if request asks to be upgraded to a WebSocket."""
    return request.method == "GET" and request.headers.get("upgrade") == "websocket"


def is_xhr(request: Request) -> bool:
    """Return True if request looks like an XHR call, judged by its JSON Content-Type."""
    return request.headers.get("content-type", "").startswith("application/json")
