"""Helpers for tests of JSON endpoints."""

import json
from typing import Any


def _compact(raw: str | bytes) -> str:
    return json.dumps(json.loads(raw), separators=(",", ":"), ensure_ascii=False)


def equal_json(a: str | bytes | None, b: str | bytes | None) -> bool:
    """Compare two JSON documents, ignoring insignificant whitespace.

    Object key order is significant. Two empty (or None) inputs are equal;
    invalid JSON on either side never is.
    """
    if not a and not b:
        return True
    try:
        return _compact(a) == _compact(b)
    except (TypeError, ValueError):
        return False


def assert_json_equal(actual: Any, expected: Any) -> None:
    """Assert equal_json(actual, expected) with a readable failure message."""
    assert equal_json(actual, expected), (
        f"JSON mismatch:\n  actual:   {actual!r}\n  expected: {expected!r}"
    )
