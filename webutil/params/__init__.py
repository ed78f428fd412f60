"""Typed request parameter access.

Three sources (form values, query string, path variables), two modes
(must_* raising, default-returning) and the usual scalar types.
"""

from .accessors import (
    form,
    query,
    params,
    must_form_string,
    must_form_bool,
    must_form_int,
    must_form_int32,
    must_form_int64,
    must_form_float32,
    must_form_float64,
    must_form_time,
    must_form_time_with_default,
    must_form_duration,
    must_form_duration_with_default,
    form_string,
    form_bool,
    form_int,
    form_int32,
    form_int64,
    form_float32,
    form_float64,
    form_time,
    form_duration,
    must_query_string,
    must_query_bool,
    must_query_int,
    must_query_int32,
    must_query_int64,
    must_query_float32,
    must_query_float64,
    must_query_time,
    must_query_time_with_default,
    must_query_duration,
    must_query_duration_with_default,
    query_string,
    query_bool,
    query_int,
    query_int32,
    query_int64,
    query_float32,
    query_float64,
    query_string_array,
    must_params_string,
    must_params_bool,
    must_params_int,
    must_params_int32,
    must_params_int64,
    must_params_float32,
    must_params_float64,
    must_params_time,
    must_params_time_with_default,
    must_params_duration,
    must_params_duration_with_default,
    params_string,
    params_bool,
    params_int,
    params_int32,
    params_int64,
    params_float32,
    params_float64,
    params_time,
    params_duration,
    query_time,
    query_time_with_default,
    query_duration,
    query_duration_with_default,
)
from .parsing import parse_bool, parse_duration, parse_float, parse_int, parse_time
from .readers import ParamReader
from .sources import FormValues, first_value, read_form

__all__ = [
    "ParamReader",
    "FormValues",
    "read_form",
    "first_value",
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_time",
    "parse_duration",
    "form",
    "query",
    "params",
    "must_form_string",
    "must_form_bool",
    "must_form_int",
    "must_form_int32",
    "must_form_int64",
    "must_form_float32",
    "must_form_float64",
    "must_form_time",
    "must_form_time_with_default",
    "must_form_duration",
    "must_form_duration_with_default",
    "form_string",
    "form_bool",
    "form_int",
    "form_int32",
    "form_int64",
    "form_float32",
    "form_float64",
    "form_time",
    "form_duration",
    "must_query_string",
    "must_query_bool",
    "must_query_int",
    "must_query_int32",
    "must_query_int64",
    "must_query_float32",
    "must_query_float64",
    "must_query_time",
    "must_query_time_with_default",
    "must_query_duration",
    "must_query_duration_with_default",
    "query_string",
    "query_bool",
    "query_int",
    "query_int32",
    "query_int64",
    "query_float32",
    "query_float64",
    "query_string_array",
    "must_params_string",
    "must_params_bool",
    "must_params_int",
    "must_params_int32",
    "must_params_int64",
    "must_params_float32",
    "must_params_float64",
    "must_params_time",
    "must_params_time_with_default",
    "must_params_duration",
    "must_params_duration_with_default",
    "params_string",
    "params_bool",
    "params_int",
    "params_int32",
    "params_int64",
    "params_float32",
    "params_float64",
    "params_time",
    "params_duration",
    "query_time",
    "query_time_with_default",
    "query_duration",
    "query_duration_with_default",
]
