"""Filters – SeasonSearchFilter for ``/v1.4/season``."""
from __future__ import annotations

from typing import ClassVar

from kp_query.filters import capabilities
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria


class SeasonSearchFilter:
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

    def movie_id(self, movie_id: int) -> "SeasonSearchFilter":
        self._filters.set("movieId", movie_id)
        return self

    def number(self, number: int, operator: str = "eq") -> "SeasonSearchFilter":
        return self.add_filter("number", number, operator)

    def episodes_count(self, count: int, operator: str = "eq") -> "SeasonSearchFilter":
        return self.add_filter("episodesCount", count, operator)

    def season_range(self, from_season: int | None, to_season: int | None) -> "SeasonSearchFilter":
        """Season numbers between *from_season* and *to_season* inclusive."""
        return self.add_range_filter("number", from_season, to_season)

    def __repr__(self) -> str:
        return f"SeasonSearchFilter({self.get_filters()!r})"


__all__ = ["SeasonSearchFilter"]
