"""Query sorting – sort field catalog, criteria and serialisations."""
from kp_query.query.sorting.criteria import (
    DEFAULT_DIRECTION,
    SORT_FIELD_KEY,
    SORT_KEY,
    SORT_TYPE_KEY,
    SortCriterion,
    SortStyle,
    colon_token,
    dash_token,
    numeric_pair,
)
from kp_query.query.sorting.engine import SortCriteria
from kp_query.query.sorting.fields import SortDataType, SortDirection, SortField, SortFieldInfo

__all__ = [
    "DEFAULT_DIRECTION",
    "SORT_FIELD_KEY",
    "SORT_KEY",
    "SORT_TYPE_KEY",
    "SortCriteria",
    "SortCriterion",
    "SortDataType",
    "SortDirection",
    "SortField",
    "SortFieldInfo",
    "SortStyle",
    "colon_token",
    "dash_token",
    "numeric_pair",
]
