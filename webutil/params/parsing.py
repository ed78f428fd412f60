"""Parsers for textual request parameters.

Every parser takes the raw string and raises ValueError when it cannot be
converted. Accepted syntax is strict: no surrounding whitespace, no digit
separators.
"""

from __future__ import annotations

import math
import re
import struct
from datetime import datetime, timedelta

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?)|nan",
    re.IGNORECASE,
)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_INF_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)

# Nanoseconds per duration unit
_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # Greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}
_DURATION_PART_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]+)")


def parse_bool(value: str) -> bool:
    """Parse 1, t, T, TRUE, true, True, 0, f, F, FALSE, false or False."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def parse_int(value: str, bits: int = 64) -> int:
    """Parse a base-10 integer that fits into a signed integer of the given width."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not -(1 << (bits - 1)) <= number < (1 << (bits - 1)):
        raise ValueError(f"integer out of range for {bits} bits: {value!r}")
    return number


def parse_float(value: str, bits: int = 64) -> float:
    """Parse a decimal, exponential, hexadecimal or inf/nan floating-point number.

    Values that overflow the target precision are rejected. With bits=32 the
    result is rounded to single precision.
    """
    try:
        if _HEX_FLOAT_RE.fullmatch(value):
            number = float.fromhex(value)
        elif _FLOAT_RE.fullmatch(value):
            number = float(value)
        else:
            raise ValueError(f"invalid float: {value!r}")
    except OverflowError as exc:
        raise ValueError(f"float out of range: {value!r}") from exc

    if math.isinf(number) and not _INF_RE.fullmatch(value):
        raise ValueError(f"float out of range: {value!r}")

    if bits == 32:
        try:
            number = struct.unpack("<f", struct.pack("<f", number))[0]
        except OverflowError as exc:
            raise ValueError(f"float out of range for 32 bits: {value!r}") from exc
    return number


def parse_time(value: str, layout: str) -> datetime:
    """Parse value against exactly one strptime layout, e.g. "%Y-%m-%d".

    The result is timezone-aware only if the layout contains %z.
    """
    return datetime.strptime(value, layout)


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as "300ms", "-1.5h" or "2h45m".

    Each component is a decimal number with a unit suffix: ns, us (or µs),
    ms, s, m, h. A bare number is rejected, except for "0". Precision below
    one microsecond is truncated.
    """
    text = value
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration: {value!r}")

    total = 0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART_RE.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration: {value!r}")
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f"invalid duration: {value!r}")
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {value!r}")
        total += int(whole or 0) * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        pos = match.end()

    if total > (1 << 63) - (0 if negative else 1):
        raise ValueError(f"invalid duration: {value!r}")

    duration = timedelta(microseconds=total // 1_000)
    return -duration if negative else duration
