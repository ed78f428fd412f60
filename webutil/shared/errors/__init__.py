"""Shared errors package.

HTTP error taxonomy and the responders that render it.
"""

from .base import (
    HasErrorDetails,
    HasStatusCode,
    HTTPError,
    Unwrapper,
    as_error,
    error_class_for_status,
    is_error,
    iter_chain,
    quote,
    status_text,
    unwrap_error,
)
from .decorators import recover_html, recover_json, recover_with
from .domain import (
    BadGatewayError,
    BadRequestError,
    ConflictError,
    ExpectationFailedError,
    FailedDependencyError,
    ForbiddenError,
    GatewayTimeoutError,
    GoneError,
    HTTPVersionNotSupportedError,
    InsufficientStorageError,
    InternalServerError,
    InvalidMethodError,
    InvalidParameterError,
    LengthRequiredError,
    LockedError,
    LoopDetectedError,
    MethodNotAllowedError,
    MisdirectedRequestError,
    MissingParameterError,
    NetworkAuthenticationRequiredError,
    NotAcceptableError,
    NotExtendedError,
    NotFoundError,
    NotImplementedHTTPError,
    PaymentRequiredError,
    PreconditionFailedError,
    PreconditionRequiredError,
    ProxyAuthRequiredError,
    RequestEntityTooLargeError,
    RequestHeaderFieldsTooLargeError,
    RequestTimeoutError,
    RequestURITooLongError,
    RequestedRangeNotSatisfiableError,
    ServerError,
    ServiceUnavailableError,
    TeapotError,
    TooEarlyError,
    TooManyRequestsError,
    UnauthorizedError,
    UnavailableForLegalReasonsError,
    UnprocessableEntityError,
    UnsupportedMediaTypeError,
    UpgradeRequiredError,
    VariantAlsoNegotiatesError,
)
from .handlers import (
    build_error_response,
    details_of,
    from_starlette_exception,
    from_validation_error,
    get_error_writer,
    normalize_error,
    register_exception_handlers,
    setup_exception_handlers,
    status_code_of,
    write_html_error,
    write_json_error,
)
from .schemas import ErrorBody, ErrorResponse

__all__ = [
    # Base
    "HTTPError",
    "HasStatusCode",
    "HasErrorDetails",
    "Unwrapper",
    "status_text",
    "quote",
    "error_class_for_status",
    "unwrap_error",
    "iter_chain",
    "is_error",
    "as_error",
    # Error kinds
    "BadRequestError",
    "UnauthorizedError",
    "PaymentRequiredError",
    "ForbiddenError",
    "NotFoundError",
    "MethodNotAllowedError",
    "NotAcceptableError",
    "ProxyAuthRequiredError",
    "RequestTimeoutError",
    "ConflictError",
    "GoneError",
    "LengthRequiredError",
    "PreconditionFailedError",
    "RequestEntityTooLargeError",
    "RequestURITooLongError",
    "UnsupportedMediaTypeError",
    "RequestedRangeNotSatisfiableError",
    "ExpectationFailedError",
    "TeapotError",
    "MisdirectedRequestError",
    "UnprocessableEntityError",
    "LockedError",
    "FailedDependencyError",
    "TooEarlyError",
    "UpgradeRequiredError",
    "PreconditionRequiredError",
    "TooManyRequestsError",
    "RequestHeaderFieldsTooLargeError",
    "UnavailableForLegalReasonsError",
    "InternalServerError",
    "NotImplementedHTTPError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "HTTPVersionNotSupportedError",
    "VariantAlsoNegotiatesError",
    "InsufficientStorageError",
    "LoopDetectedError",
    "NotExtendedError",
    "NetworkAuthenticationRequiredError",
    "MissingParameterError",
    "InvalidParameterError",
    # Aliases
    "InvalidMethodError",
    "ServerError",
    # Responders
    "status_code_of",
    "details_of",
    "build_error_response",
    "write_html_error",
    "write_json_error",
    "from_starlette_exception",
    "from_validation_error",
    "normalize_error",
    "get_error_writer",
    "setup_exception_handlers",
    "register_exception_handlers",
    # Decorators
    "recover_html",
    "recover_json",
    "recover_with",
    # Schemas
    "ErrorBody",
    "ErrorResponse",
]
