"""Raw parameter lookup for the three parameter sources.

- Form values: the body form merged with the query string (see read_form)
- Query string: request.query_params
- Path variables: request.path_params, filled in by the router

Lookups are case-sensitive and return the first value for a key, or "" when
the key is absent. This module never mutates the request.
"""

from collections.abc import Mapping
from typing import Annotated, Any

from fastapi import Depends
from starlette.datastructures import ImmutableMultiDict
from starlette.requests import Request

# Methods whose body is parsed as a form
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


async def read_form(request: Request) -> ImmutableMultiDict:
    """Return body form values followed by query string values.

    The body is parsed for POST, PUT and PATCH requests with a urlencoded or
    multipart body. Uploaded files are skipped. Since lookups take the first
    value, body values win over query values for the same key.

    Usable as a FastAPI dependency (see FormValues).
    """
    items: list[tuple[str, str]] = []
    if request.method in _BODY_METHODS:
        form = await request.form()
        items.extend((key, value) for key, value in form.multi_items() if isinstance(value, str))
    items.extend(request.query_params.multi_items())
    return ImmutableMultiDict(items)


FormValues = Annotated[ImmutableMultiDict, Depends(read_form)]


def first_value(values: Mapping[str, Any], key: str) -> str:
    """Return the first value stored under key, or "" if there is none."""
    getlist = getattr(values, "getlist", None)
    if getlist is not None:
        found = getlist(key)
        return str(found[0]) if found else ""
    value = values.get(key)
    return "" if value is None else str(value)


def lookup_form(values: Mapping[str, Any], key: str) -> str:
    return first_value(values, key)


def lookup_query(request: Request, key: str) -> str:
    return first_value(request.query_params, key)


def lookup_path(request: Request, key: str) -> str:
    return first_value(request.path_params, key)
