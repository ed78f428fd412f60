"""Base class and capability protocols for HTTP errors.

Every error kind carries a fixed HTTP status code, an optional message,
optional details and an optional wrapped cause. Responders never look at
concrete classes: they inspect errors through the capability protocols
below, so any object with a ``status_code`` (e.g. Starlette's
``HTTPException``) is rendered the same way.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from http import HTTPStatus
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

E = TypeVar("E", bound=BaseException)

_GO_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


@runtime_checkable
class HasStatusCode(Protocol):
    """Error value exposing the HTTP status code to respond with."""

    status_code: int


@runtime_checkable
class HasErrorDetails(Protocol):
    """Error value exposing a list of detail strings."""

    details: Sequence[str]


@runtime_checkable
class Unwrapper(Protocol):
    """Error value exposing the cause it wraps."""

    def unwrap(self) -> BaseException | None: ...


def status_text(code: int) -> str:
    """Return the standard reason phrase for code, or "" if unknown."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def quote(value: str) -> str:
    """Double-quote value, escaping quotes, backslashes and non-printables."""
    out = []
    for ch in value:
        if ch in _GO_ESCAPES:
            out.append(_GO_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        elif ord(ch) < 0x80:
            out.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(out) + '"'


class HTTPError(Exception):
    """Base class for all HTTP errors.

    Features:
    - Fixed status code per subclass
    - Text falls back to the standard reason phrase when no message is given
    - Value equality (same class, message, details and cause)
    - Subclasses register themselves by status code (see error_class_for_status)
    """

    status_code: ClassVar[int] = 500
    # Extra response headers, e.g. WWW-Authenticate or Allow
    headers: dict[str, str] | None = None

    _registry: ClassVar[dict[int, type[HTTPError]]] = {}

    def __init__(
        self,
        message: str = "",
        details: Sequence[str] | None = None,
        err: BaseException | None = None,
    ) -> None:
        self.message = message
        if isinstance(details, str):
            details = (details,)
        self.details: tuple[str, ...] = tuple(details or ())
        self.err = err
        super().__init__(message)
        if err is not None:
            self.__cause__ = err

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register subclasses that declare their own status code."""
        super().__init_subclass__(**kwargs)
        if "status_code" in cls.__dict__:
            HTTPError._registry.setdefault(cls.status_code, cls)

    def __str__(self) -> str:
        return self.message or status_text(self.status_code)

    def __repr__(self) -> str:
        parts = [f"message={self.message!r}"]
        if self.details:
            parts.append(f"details={list(self.details)!r}")
        if self.err is not None:
            parts.append(f"err={self.err!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.details, self.err) == (
            other.message,  # type: ignore[attr-defined]
            other.details,  # type: ignore[attr-defined]
            other.err,  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.details))

    @property
    def text(self) -> str:
        """Message, or the standard reason phrase if the message is empty."""
        return str(self)

    def unwrap(self) -> BaseException | None:
        """Return the wrapped cause, if any."""
        return self.err

    @classmethod
    def openapi_response(cls) -> dict[str, Any]:
        """Generate an OpenAPI response entry for this error kind.

        Usage:
            @app.get("/items/{id}", responses={404: NotFoundError.openapi_response()})
        """
        from .schemas import ErrorResponse

        phrase = status_text(cls.status_code)
        return {
            "model": ErrorResponse,
            "description": phrase,
            "content": {
                "application/json": {
                    "example": {"error": {"code": cls.status_code, "message": phrase}},
                }
            },
        }


def error_class_for_status(code: int) -> type[HTTPError] | None:
    """Return the canonical error kind for an HTTP status code."""
    return HTTPError._registry.get(code)


def unwrap_error(err: object) -> object | None:
    """Return the cause wrapped by err.

    Uses err.unwrap() when available, and the exception's __cause__ otherwise.
    """
    if isinstance(err, Unwrapper):
        return err.unwrap()
    return getattr(err, "__cause__", None)


def iter_chain(err: object) -> Iterator[object]:
    """Yield err followed by every cause reachable through unwrap_error."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap_error(err)


def is_error(err: object, target: object) -> bool:
    """Report whether any error in err's chain equals target."""
    return any(link == target for link in iter_chain(err))


def as_error(err: object, cls: type[E]) -> E | None:
    """Return the first error in err's chain that is an instance of cls."""
    for link in iter_chain(err):
        if isinstance(link, cls):
            return link
    return None
