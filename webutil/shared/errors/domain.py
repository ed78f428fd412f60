"""HTTP error kinds.

One class per client (4xx) and server (5xx) error status code, plus the two
parameter errors raised by the accessors in webutil.params.
"""

from .base import HTTPError, quote

# ==================== 4xx ====================


class BadRequestError(HTTPError):
    """The request is malformed or invalid."""

    status_code = 400


class UnauthorizedError(HTTPError):
    """Credentials are missing or invalid."""

    status_code = 401


class PaymentRequiredError(HTTPError):
    """Payment is required to access the resource."""

    status_code = 402


class ForbiddenError(HTTPError):
    """Access to the resource is denied."""

    status_code = 403


class NotFoundError(HTTPError):
    """The record or resource does not exist."""

    status_code = 404


class MethodNotAllowedError(HTTPError):
    """The HTTP method is not supported by the resource."""

    status_code = 405


class NotAcceptableError(HTTPError):
    """No representation matches the Accept headers."""

    status_code = 406


class ProxyAuthRequiredError(HTTPError):
    """The client must authenticate with the proxy."""

    status_code = 407


class RequestTimeoutError(HTTPError):
    """The server timed out waiting for the request."""

    status_code = 408


class ConflictError(HTTPError):
    """The request conflicts with the current state of the resource."""

    status_code = 409


class GoneError(HTTPError):
    """The resource is no longer available."""

    status_code = 410


class LengthRequiredError(HTTPError):
    """The request lacks a Content-Length header."""

    status_code = 411


class PreconditionFailedError(HTTPError):
    """A request precondition evaluated to false."""

    status_code = 412


class RequestEntityTooLargeError(HTTPError):
    """The request body is larger than the server accepts."""

    status_code = 413


class RequestURITooLongError(HTTPError):
    """The request target is longer than the server accepts."""

    status_code = 414


class UnsupportedMediaTypeError(HTTPError):
    """The request body has an unsupported media type."""

    status_code = 415


class RequestedRangeNotSatisfiableError(HTTPError):
    """The requested range cannot be served."""

    status_code = 416


class ExpectationFailedError(HTTPError):
    """The Expect header cannot be met."""

    status_code = 417


class TeapotError(HTTPError):
    """The server refuses to brew coffee because it is a teapot."""

    status_code = 418


class MisdirectedRequestError(HTTPError):
    """The request was directed at a server that cannot respond."""

    status_code = 421


class UnprocessableEntityError(HTTPError):
    """The request is well-formed but semantically invalid, e.g. a record with validation errors."""

    status_code = 422


class LockedError(HTTPError):
    """The resource is locked."""

    status_code = 423


class FailedDependencyError(HTTPError):
    """The request failed because a previous request failed."""

    status_code = 424


class TooEarlyError(HTTPError):
    """The server is unwilling to process a request that might be replayed."""

    status_code = 425


class UpgradeRequiredError(HTTPError):
    """The client must switch to a different protocol."""

    status_code = 426


class PreconditionRequiredError(HTTPError):
    """The request must be conditional."""

    status_code = 428


class TooManyRequestsError(HTTPError):
    """The client has sent too many requests."""

    status_code = 429


class RequestHeaderFieldsTooLargeError(HTTPError):
    """The request header fields are too large."""

    status_code = 431


class UnavailableForLegalReasonsError(HTTPError):
    """The resource is unavailable for legal reasons."""

    status_code = 451


# ==================== 5xx ====================


class InternalServerError(HTTPError):
    """Any kind of internal server problem."""

    status_code = 500


class NotImplementedHTTPError(HTTPError):
    """The endpoint has yet to be implemented."""

    status_code = 501


class BadGatewayError(HTTPError):
    """An upstream server returned an invalid response."""

    status_code = 502


class ServiceUnavailableError(HTTPError):
    """The server is temporarily unable to handle the request."""

    status_code = 503


class GatewayTimeoutError(HTTPError):
    """An upstream server did not respond in time."""

    status_code = 504


class HTTPVersionNotSupportedError(HTTPError):
    """The HTTP version of the request is not supported."""

    status_code = 505


class VariantAlsoNegotiatesError(HTTPError):
    """Transparent content negotiation resulted in a loop."""

    status_code = 506


class InsufficientStorageError(HTTPError):
    """The server cannot store the representation."""

    status_code = 507


class LoopDetectedError(HTTPError):
    """The server detected an infinite loop while processing."""

    status_code = 508


class NotExtendedError(HTTPError):
    """Further extensions to the request are required."""

    status_code = 510


class NetworkAuthenticationRequiredError(HTTPError):
    """The client must authenticate to gain network access."""

    status_code = 511


# Names kept for backwards compatibility
InvalidMethodError = MethodNotAllowedError
ServerError = InternalServerError


# ==================== Parameter errors ====================


class MissingParameterError(BadRequestError):
    """A required parameter is missing or blank.

    Unwraps to the equivalent BadRequestError, so
    is_error(MissingParameterError("id"), BadRequestError('Missing parameter "id"'))
    holds.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing parameter {quote(name)}")

    def unwrap(self) -> BadRequestError:
        return BadRequestError(self.message)


class InvalidParameterError(BadRequestError):
    """A parameter is present but cannot be converted to the requested type."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid parameter {quote(name)}")

    def unwrap(self) -> BadRequestError:
        return BadRequestError(self.message)
