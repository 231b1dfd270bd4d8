"""Filters – capability functions shared by every resource facade.

Facades do not inherit from a common base. Each one owns a
:class:`FilterMap` and a :class:`SortCriteria` and picks the capabilities
it exposes by binding these functions as methods::

    class ImageSearchFilter:
        explicit_eq = True

        def __init__(self) -> None:
            self._filters = FilterMap()
            self._sort = SortCriteria()

        add_filter = capabilities.add_filter
        search_by_name = capabilities.search_by_name

Mutating capabilities return the facade itself so calls chain.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, ClassVar, Protocol, TypeVar

from kp_query.query.encoding import (
    DATE_FORMAT,
    Operator,
    as_list,
    filter_key,
    range_value,
    scalar,
)
from kp_query.query.filter_map import FilterMap
from kp_query.query.pagination import LIMIT_KEY, PAGE_KEY
from kp_query.query.sorting import (
    DEFAULT_DIRECTION,
    SORT_FIELD_KEY,
    SORT_KEY,
    SORT_TYPE_KEY,
    SortCriteria,
    SortCriterion,
    SortDirection,
    SortField,
    SortStyle,
)


class FilterHost(Protocol):
    explicit_eq: ClassVar[bool]
    _filters: FilterMap
    _sort: SortCriteria

    def _sort_params(self) -> dict[str, Any]: ...


F = TypeVar("F", bound=FilterHost)


class SingleSortHost(FilterHost, Protocol):
    _sort_style: SortStyle


S = TypeVar("S", bound=SingleSortHost)


def wire_value(value: Any) -> Any:
    """Unwrap enums and format dates, keeping lists as lists."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return [wire_value(item) for item in value]
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return scalar(value)


# ---------------------------------------------------------------------------
# Generic filters
# ---------------------------------------------------------------------------


def add_filter(self: F, field: str, value: Any, operator: str | Operator = Operator.EQ) -> F:
    """Write ``field[.operator] = value`` using the facade's equality form."""
    self._filters.set(filter_key(field, operator, explicit_eq=self.explicit_eq), wire_value(value))
    return self


def add_range_filter(self: F, field: str, minimum: Any = None, maximum: Any = None) -> F:
    """Write one ``gte:…,lte:…`` value for *field*; nothing happens if both bounds are ``None``."""
    encoded = range_value(minimum, maximum)
    if encoded is not None:
        self._filters.set(field, encoded)
    return self


def add_nested_filter(self: F, field: str, value: Any) -> F:
    """Pass a nested object filter through as dotted keys.

    ``add_nested_filter("budget", {"value": "1000-5000", "currency": "$"})``
    writes ``budget.value`` and ``budget.currency``. A non-mapping value is
    written under *field* itself.
    """
    if isinstance(value, Mapping):
        for key, item in value.items():
            add_nested_filter(self, f"{field}.{key}", item)
    else:
        self._filters.set(field, wire_value(value))
    return self


def remove_filter(self: F, key: str) -> F:
    """Drop *key*; a sort key clears the facade's sort criteria."""
    if key in (SORT_KEY, SORT_FIELD_KEY, SORT_TYPE_KEY):
        self._sort.clear()
    self._filters.remove(key)
    return self


def id(self: F, ids: Any, operator: str | Operator = Operator.EQ) -> F:  # noqa: A001
    """Filter by one id or a batch of ids.

    Equality always writes the bare ``id`` key with a list; other
    operators use the ``id.<operator>`` key.
    """
    if str(scalar(operator)) == Operator.EQ.value:
        self._filters.set("id", as_list(ids))
        return self
    return add_filter(self, "id", ids, operator)


def search_by_name(self: F, query: str) -> F:
    return add_filter(self, "name", query, Operator.REGEX)


def search_by_en_name(self: F, query: str) -> F:
    return add_filter(self, "enName", query, Operator.REGEX)


def search_by_description(self: F, query: str) -> F:
    return add_filter(self, "description", query, Operator.REGEX)


def not_null_fields(self: F, fields: Iterable[str] | str) -> F:
    self._filters.not_null_fields(fields)
    return self


def select_fields(self: F, fields: Iterable[str] | str) -> F:
    self._filters.select_fields(fields)
    return self


def page(self: F, number: int) -> F:
    self._filters.set(PAGE_KEY, number)
    return self


def limit(self: F, size: int) -> F:
    self._filters.set(LIMIT_KEY, size)
    return self


def get_filters(self: F) -> dict[str, Any]:
    """Snapshot of every query parameter, sort parameters last."""
    params = self._filters.snapshot()
    params.update(self._sort_params())
    return params


def reset(self: F) -> F:
    self._filters.reset()
    self._sort.clear()
    return self


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def dash_sort_params(self: F) -> dict[str, Any]:
    """Every criterion as one ``sort=-rating.kp,year`` parameter."""
    value = self._sort.to_dash_string()
    return {} if value is None else {SORT_KEY: value}


def single_sort_params(self: S) -> dict[str, Any]:
    """The primary criterion spelled in the facade's ``_sort_style``."""
    criterion = self._sort.first
    if criterion is None:
        return {}
    return self._sort_style.params(criterion)


def sort_by(self: F, field: SortField | str, direction: SortDirection | str | int = DEFAULT_DIRECTION) -> F:
    self._sort.add_sort(field, direction)
    return self


def sort_by_asc(self: F, field: SortField | str) -> F:
    self._sort.add_sort(field, SortDirection.ASC)
    return self


def sort_by_desc(self: F, field: SortField | str) -> F:
    self._sort.add_sort(field, SortDirection.DESC)
    return self


def toggle_sort(self: F, field: SortField | str) -> F:
    self._sort.toggle(field)
    return self


def remove_sort(self: F, field: SortField | str) -> F:
    self._sort.remove_by(field)
    return self


def clear_sort(self: F) -> F:
    self._sort.clear()
    return self


def add_multiple_sort(self: F, tokens: Iterable[str]) -> F:
    self._sort.add_multiple(tokens)
    return self


def export_sort_criteria(self: F) -> list[dict[str, str]]:
    return self._sort.export_criteria()


def import_sort_criteria(self: F, data: Iterable[Mapping[str, Any]] | Mapping[str, Any]) -> F:
    self._sort.import_criteria(data)
    return self


def _get_sort_criteria(self: FilterHost) -> SortCriteria:
    return self._sort


sort_criteria = property(_get_sort_criteria, doc="The facade's :class:`SortCriteria`.")


# ---------------------------------------------------------------------------
# Single-criterion sorting
#
# Studio and keyword endpoints take one sort at a time. Each helper replaces
# the facade's criteria and records the spelling ``single_sort_params``
# uses when the parameters are built.
# ---------------------------------------------------------------------------


def _replace_sort(self: S, style: SortStyle, field: SortField | str, direction: Any) -> S:
    criterion = SortCriterion.of(field, direction)
    self._sort.clear().add_criterion(criterion)
    self._sort_style = style
    return self


def dash_sort(self: S, field: SortField | str, direction: SortDirection | str | int = DEFAULT_DIRECTION) -> S:
    """``sort=title`` / ``sort=-title``."""
    return _replace_sort(self, SortStyle.DASH, field, direction)


def colon_sort(self: S, field: SortField | str, direction: SortDirection | str | int = DEFAULT_DIRECTION) -> S:
    """``sort=movieCount:desc``."""
    return _replace_sort(self, SortStyle.COLON, field, direction)


def pair_sort(self: S, field: SortField | str, direction: SortDirection | str | int = DEFAULT_DIRECTION) -> S:
    """``sortField=id&sortType=1``."""
    return _replace_sort(self, SortStyle.PAIR, field, direction)


__all__ = [
    "FilterHost",
    "SingleSortHost",
    "add_filter",
    "add_multiple_sort",
    "add_nested_filter",
    "add_range_filter",
    "clear_sort",
    "colon_sort",
    "dash_sort",
    "dash_sort_params",
    "export_sort_criteria",
    "get_filters",
    "id",
    "import_sort_criteria",
    "limit",
    "not_null_fields",
    "page",
    "pair_sort",
    "remove_filter",
    "remove_sort",
    "reset",
    "search_by_description",
    "search_by_en_name",
    "search_by_name",
    "select_fields",
    "single_sort_params",
    "sort_by",
    "sort_by_asc",
    "sort_by_desc",
    "sort_criteria",
    "toggle_sort",
    "wire_value",
]
