"""Typed parameter readers.

A ParamReader wraps one raw lookup function and offers two access modes
for every supported type:

- must_*: raise MissingParameterError if the key is absent or blank and
  InvalidParameterError if the value cannot be converted.
- get_*: return the given default instead of raising.

Readers built with strict_numbers=True raise InvalidParameterError from
get_int, get_int32, get_int64, get_float32 and get_float64 when a value is
present but malformed; an absent key still yields the default. The path
variable reader is built this way and client code depends on it.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from functools import partial
from typing import Any, TypeVar

from webutil.shared.errors.domain import InvalidParameterError, MissingParameterError

from .parsing import parse_bool, parse_duration, parse_float, parse_int, parse_time

T = TypeVar("T")

Lookup = Callable[[Any, str], str]

_parse_int32 = partial(parse_int, bits=32)
_parse_int64 = partial(parse_int, bits=64)
_parse_float32 = partial(parse_float, bits=32)
_parse_float64 = partial(parse_float, bits=64)


def _identity(value: str) -> str:
    return value


class ParamReader:
    """Typed access to one parameter source."""

    def __init__(self, lookup: Lookup, *, strict_numbers: bool = False) -> None:
        self._lookup = lookup
        self.strict_numbers = strict_numbers

    def raw(self, source: Any, key: str) -> str:
        """Return the raw value for key, or "" if it is absent."""
        return self._lookup(source, key)

    def _must(self, source: Any, key: str, parse: Callable[[str], T]) -> T:
        value = self._lookup(source, key)
        if value == "":
            raise MissingParameterError(key)
        try:
            return parse(value)
        except ValueError as exc:
            raise InvalidParameterError(key) from exc

    def _must_or_default(
        self, source: Any, key: str, default: T, parse: Callable[[str], T]
    ) -> T:
        value = self._lookup(source, key)
        if value == "":
            return default
        try:
            return parse(value)
        except ValueError as exc:
            raise InvalidParameterError(key) from exc

    def _get(
        self,
        source: Any,
        key: str,
        default: T,
        parse: Callable[[str], T],
        strict: bool = False,
    ) -> T:
        value = self._lookup(source, key)
        if value == "":
            return default
        try:
            return parse(value)
        except ValueError as exc:
            if strict:
                raise InvalidParameterError(key) from exc
            return default

    # ==================== Must mode ====================

    def must_string(self, source: Any, key: str) -> str:
        return self._must(source, key, _identity)

    def must_bool(self, source: Any, key: str) -> bool:
        return self._must(source, key, parse_bool)

    def must_int(self, source: Any, key: str) -> int:
        return self._must(source, key, _parse_int64)

    def must_int32(self, source: Any, key: str) -> int:
        return self._must(source, key, _parse_int32)

    def must_int64(self, source: Any, key: str) -> int:
        return self._must(source, key, _parse_int64)

    def must_float32(self, source: Any, key: str) -> float:
        return self._must(source, key, _parse_float32)

    def must_float64(self, source: Any, key: str) -> float:
        return self._must(source, key, _parse_float64)

    def must_time(self, source: Any, key: str, layout: str) -> datetime:
        """Parse key with the strptime layout, e.g. "%Y-%m-%dT%H:%M:%S%z"."""
        return self._must(source, key, partial(parse_time, layout=layout))

    def must_time_with_default(
        self, source: Any, key: str, layout: str, default: datetime
    ) -> datetime:
        """Like must_time, but returns default if key is missing."""
        return self._must_or_default(source, key, default, partial(parse_time, layout=layout))

    def must_duration(self, source: Any, key: str) -> timedelta:
        """Parse key as a duration such as "1m12s"."""
        return self._must(source, key, parse_duration)

    def must_duration_with_default(self, source: Any, key: str, default: timedelta) -> timedelta:
        """Like must_duration, but returns default if key is missing."""
        return self._must_or_default(source, key, default, parse_duration)

    # ==================== Default mode ====================

    def get_string(self, source: Any, key: str, default: str) -> str:
        return self._get(source, key, default, _identity)

    def get_string_array(self, source: Any, key: str, default: list[str]) -> list[str]:
        """Split the value on commas; default is returned as is when key is missing."""
        value = self._lookup(source, key)
        if value == "":
            return default
        return value.split(",")

    def get_bool(self, source: Any, key: str, default: bool) -> bool:
        return self._get(source, key, default, parse_bool)

    def get_int(self, source: Any, key: str, default: int) -> int:
        return self._get(source, key, default, _parse_int64, self.strict_numbers)

    def get_int32(self, source: Any, key: str, default: int) -> int:
        return self._get(source, key, default, _parse_int32, self.strict_numbers)

    def get_int64(self, source: Any, key: str, default: int) -> int:
        return self._get(source, key, default, _parse_int64, self.strict_numbers)

    def get_float32(self, source: Any, key: str, default: float) -> float:
        return self._get(source, key, default, _parse_float32, self.strict_numbers)

    def get_float64(self, source: Any, key: str, default: float) -> float:
        return self._get(source, key, default, _parse_float64, self.strict_numbers)

    def get_time(self, source: Any, key: str, layout: str, default: T) -> datetime | T:
        return self._get(source, key, default, partial(parse_time, layout=layout))

    def get_duration(self, source: Any, key: str, default: timedelta) -> timedelta:
        return self._get(source, key, default, parse_duration)
