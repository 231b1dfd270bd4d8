"""Query – filter map, encoders, sort criteria and pagination."""
from kp_query.query.filter_map import SELECT_FIELDS_KEY, FilterMap
from kp_query.query.pagination import LIMIT_KEY, PAGE_KEY, PageRequest
from kp_query.query.sorting import SortCriteria, SortCriterion, SortDirection, SortField

__all__ = [
    "LIMIT_KEY",
    "PAGE_KEY",
    "SELECT_FIELDS_KEY",
    "FilterMap",
    "PageRequest",
    "SortCriteria",
    "SortCriterion",
    "SortDirection",
    "SortField",
]
