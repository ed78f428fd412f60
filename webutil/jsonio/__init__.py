"""JSON request decoding and response writing."""

from .pool import BufferPool, default_pool
from .reader import InvalidJSONError, close_body, must_read_json, read_json
from .writer import IndentedJSONResponse, write_json, write_json_code

__all__ = [
    "BufferPool",
    "default_pool",
    "InvalidJSONError",
    "read_json",
    "must_read_json",
    "close_body",
    "IndentedJSONResponse",
    "write_json",
    "write_json_code",
]
