"""Query encoding – operator and set-algebra wire encodings."""
from kp_query.query.encoding.operators import (
    DATE_FORMAT,
    Operator,
    as_list,
    filter_key,
    format_bound,
    not_equal_key,
    range_value,
    regex_key,
    regex_value,
    scalar,
)
from kp_query.query.encoding.set_algebra import exclude, include, include_all

__all__ = [
    "DATE_FORMAT",
    "Operator",
    "as_list",
    "exclude",
    "filter_key",
    "format_bound",
    "include",
    "include_all",
    "not_equal_key",
    "range_value",
    "regex_key",
    "regex_value",
    "scalar",
]
