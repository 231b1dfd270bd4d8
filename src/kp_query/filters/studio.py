"""Filters – StudioSearchFilter for ``/v1.4/studio``."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar

from kp_query.filters import capabilities
from kp_query.kernel.types import StudioType
from kp_query.query.encoding import as_list, exclude, include_all
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria, SortField, SortStyle


def _one_or_many(value: Any) -> Any:
    values = as_list(value)
    return values[0] if len(values) == 1 else values


class StudioSearchFilter:
    """Fluent studio filter.

    Sorting is a single ``sort`` parameter: text fields use the dash
    convention (``-title``), popularity uses the colon convention
    (``movieCount:desc``). Each sort helper replaces the previous one.
    """

    explicit_eq: ClassVar[bool] = True
    _sort_style: SortStyle = SortStyle.DASH

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
    sort_criteria = capabilities.sort_criteria
    _sort_params = capabilities.single_sort_params

    def movie_id(self, movie_ids: int | Iterable[int]) -> "StudioSearchFilter":
        self._filters.set("movies.id", _one_or_many(movie_ids))
        return self

    def studio_type(self, types: StudioType | str | Iterable[StudioType | str]) -> "StudioSearchFilter":
        self._filters.set("type", _one_or_many(types))
        return self

    def sub_type(self, sub_types: str | Iterable[str]) -> "StudioSearchFilter":
        self._filters.set("subType", _one_or_many(sub_types))
        return self

    def title(self, titles: str | Iterable[str]) -> "StudioSearchFilter":
        self._filters.set("title", _one_or_many(titles))
        return self

    def production_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.PRODUCTION)

    def special_effects_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.SPECIAL_EFFECTS)

    def distribution_companies(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.DISTRIBUTION)

    def dubbing_studios(self) -> "StudioSearchFilter":
        return self.studio_type(StudioType.DUBBING_STUDIO)

    def exclude_types(self, types: StudioType | str | Iterable[StudioType | str]) -> "StudioSearchFilter":
        """``type=!Прокат,!Студия дубляжа``; replaces any ``studio_type`` value."""
        self._filters.set("type", exclude(types))
        return self

    def participated_in_all_movies(self, movie_ids: Iterable[int]) -> "StudioSearchFilter":
        """Studios credited on every one of *movie_ids*."""
        self._filters.set("movies.id", include_all(movie_ids))
        return self

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort_by_title(self, direction: str = "asc") -> "StudioSearchFilter":
        return capabilities.dash_sort(self, SortField.TITLE, direction)

    def sort_by_type(self, direction: str = "asc") -> "StudioSearchFilter":
        return capabilities.dash_sort(self, SortField.TYPE, direction)

    def sort_by_popularity(self, direction: str = "desc") -> "StudioSearchFilter":
        return capabilities.colon_sort(self, SortField.MOVIE_COUNT, direction)

    def __repr__(self) -> str:
        return f"StudioSearchFilter({self.get_filters()!r})"


__all__ = ["StudioSearchFilter"]
