"""Filters – ReviewSearchFilter for ``/v1.4/review``."""
from __future__ import annotations

from typing import ClassVar

from kp_query.filters import capabilities
from kp_query.kernel.types import ReviewType
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria


class ReviewSearchFilter:
    """Fluent review filter; free-text helpers default to ``regex``."""

    explicit_eq: ClassVar[bool] = True

    def __init__(self) -> None:
        self._filters = FilterMap()
        self._sort = SortCriteria()

    add_filter = capabilities.add_filter
    add_range_filter = capabilities.add_range_filter
    remove_filter = capabilities.remove_filter
    id = capabilities.id
    search_by_name = capabilities.search_by_name
    search_by_en_name = capabilities.search_by_en_name
    search_by_description = capabilities.search_by_description
    not_null_fields = capabilities.not_null_fields
    select_fields = capabilities.select_fields
    page = capabilities.page
    limit = capabilities.limit
    get_filters = capabilities.get_filters
    reset = capabilities.reset

    sort_by = capabilities.sort_by
    sort_by_asc = capabilities.sort_by_asc
    sort_by_desc = capabilities.sort_by_desc
    toggle_sort = capabilities.toggle_sort
    remove_sort = capabilities.remove_sort
    clear_sort = capabilities.clear_sort
    add_multiple_sort = capabilities.add_multiple_sort
    export_sort_criteria = capabilities.export_sort_criteria
    import_sort_criteria = capabilities.import_sort_criteria
    sort_criteria = capabilities.sort_criteria
    _sort_params = capabilities.dash_sort_params

    def movie_id(self, movie_id: int) -> "ReviewSearchFilter":
        self._filters.set("movieId", movie_id)
        return self

    def type(self, review_type: ReviewType | str, operator: str = "eq") -> "ReviewSearchFilter":
        return self.add_filter("type", review_type, operator)

    def author(self, author: str, operator: str = "regex") -> "ReviewSearchFilter":
        return self.add_filter("author", author, operator)

    def review(self, review: str, operator: str = "regex") -> "ReviewSearchFilter":
        return self.add_filter("review", review, operator)

    def title(self, title: str, operator: str = "regex") -> "ReviewSearchFilter":
        return self.add_filter("title", title, operator)

    def only_positive(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.POSITIVE)

    def only_negative(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.NEGATIVE)

    def only_neutral(self) -> "ReviewSearchFilter":
        return self.type(ReviewType.NEUTRAL)

    def __repr__(self) -> str:
        return f"ReviewSearchFilter({self.get_filters()!r})"


__all__ = ["ReviewSearchFilter"]
