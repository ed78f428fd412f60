"""Pytest configuration for unit tests.

Provides request builders for testing accessors and helpers against raw
ASGI scopes, and small FastAPI applications for responder tests.
"""

from collections.abc import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.requests import Request

from webutil.jsonio import BufferPool
from webutil.shared.errors import setup_exception_handlers


def build_request(
    method: str = "GET",
    path: str = "/",
    query: str = "",
    headers: dict[str, str] | None = None,
    path_params: dict[str, str] | None = None,
    chunks: list[bytes] | None = None,
) -> Request:
    """Build a Starlette Request whose body arrives in the given chunks."""
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "path": path,
        "raw_path": path.encode(),
        "query_string": query.encode(),
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
        "path_params": path_params or {},
    }
    messages = [
        {"type": "http.request", "body": chunk, "more_body": True}
        for chunk in (chunks or [])
    ]
    messages.append({"type": "http.request", "body": b"", "more_body": False})

    async def receive() -> dict:
        return messages.pop(0)

    return Request(scope, receive)


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for Starlette requests built from a raw ASGI scope."""
    return build_request


@pytest.fixture
def pool():
    """Create a fresh buffer pool isolated from the process-wide one."""
    return BufferPool(max_idle=4)


@pytest.fixture
def app():
    """Create a bare FastAPI application without exception handlers."""
    return FastAPI()


@pytest.fixture
def json_app():
    """Create a FastAPI application with JSON exception handlers installed."""
    application = FastAPI()
    setup_exception_handlers(application, "json")
    return application


@pytest.fixture
def html_app():
    """Create a FastAPI application with HTML exception handlers installed."""
    application = FastAPI()
    setup_exception_handlers(application, "html")
    return application


@pytest.fixture
def client(app):
    """Create a test client for the bare application."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def json_client(json_app):
    """Create a test client for the JSON application."""
    return TestClient(json_app, raise_server_exceptions=False)


@pytest.fixture
def html_client(html_app):
    """Create a test client for the HTML application."""
    return TestClient(html_app, raise_server_exceptions=False)
