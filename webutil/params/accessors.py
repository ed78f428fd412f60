"""Parameter accessors for form values, query strings and path variables.

Form accessors take the values returned by read_form() (or the FormValues
FastAPI dependency). Query and path accessors take the request itself.

Usage:
    @app.get("/users/{id}")
    @recover_json
    async def get_user(request: Request) -> Response:
        user_id = must_params_int(request, "id")
        limit = query_int(request, "limit", 20)
        ...
"""

from datetime import datetime, timedelta

from starlette.requests import Request

from .readers import ParamReader
from .sources import lookup_form, lookup_path, lookup_query

form = ParamReader(lookup_form)
query = ParamReader(lookup_query)
# Malformed numeric path variables raise even in default mode
params = ParamReader(lookup_path, strict_numbers=True)

# ==================== form ====================

must_form_string = form.must_string
must_form_bool = form.must_bool
must_form_int = form.must_int
must_form_int32 = form.must_int32
must_form_int64 = form.must_int64
must_form_float32 = form.must_float32
must_form_float64 = form.must_float64
must_form_time = form.must_time
must_form_time_with_default = form.must_time_with_default
must_form_duration = form.must_duration
must_form_duration_with_default = form.must_duration_with_default

form_string = form.get_string
form_bool = form.get_bool
form_int = form.get_int
form_int32 = form.get_int32
form_int64 = form.get_int64
form_float32 = form.get_float32
form_float64 = form.get_float64
form_time = form.get_time
form_duration = form.get_duration

# ==================== query ====================

must_query_string = query.must_string
must_query_bool = query.must_bool
must_query_int = query.must_int
must_query_int32 = query.must_int32
must_query_int64 = query.must_int64
must_query_float32 = query.must_float32
must_query_float64 = query.must_float64
must_query_time = query.must_time
must_query_time_with_default = query.must_time_with_default
must_query_duration = query.must_duration
must_query_duration_with_default = query.must_duration_with_default

query_string = query.get_string
query_bool = query.get_bool
query_int = query.get_int
query_int32 = query.get_int32
query_int64 = query.get_int64
query_float32 = query.get_float32
query_float64 = query.get_float64
query_string_array = query.get_string_array

# ==================== params ====================

must_params_string = params.must_string
must_params_bool = params.must_bool
must_params_int = params.must_int
must_params_int32 = params.must_int32
must_params_int64 = params.must_int64
must_params_float32 = params.must_float32
must_params_float64 = params.must_float64
must_params_time = params.must_time
must_params_time_with_default = params.must_time_with_default
must_params_duration = params.must_duration
must_params_duration_with_default = params.must_duration_with_default

params_string = params.get_string
params_bool = params.get_bool
params_int = params.get_int
params_int32 = params.get_int32
params_int64 = params.get_int64
params_float32 = params.get_float32
params_float64 = params.get_float64
params_time = params.get_time
params_duration = params.get_duration


def query_time(
    request: Request, key: str, layout: str, default: datetime | None = None
) -> datetime | None:
    """Parse the query value for key with layout; default (None) if missing or invalid."""
    return query.get_time(request, key, layout, default)


def query_time_with_default(
    request: Request, key: str, layout: str, default: datetime
) -> datetime:
    return query.get_time(request, key, layout, default)


def query_duration(request: Request, key: str, default: timedelta = timedelta(0)) -> timedelta:
    """Parse the query value for key as a duration; default (zero) if missing or invalid."""
    return query.get_duration(request, key, default)


def query_duration_with_default(request: Request, key: str, default: timedelta) -> timedelta:
    return query.get_duration(request, key, default)
