"""Filters – KeywordSearchFilter for ``/v1.4/keyword``."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta
from typing import ClassVar

from kp_query.filters import capabilities
from kp_query.kernel.time import Clock, SystemClock
from kp_query.query.encoding import as_list, regex_value
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria, SortField, SortStyle

logger = logging.getLogger(__name__)


class KeywordSearchFilter:
    """Fluent keyword filter.

    ``title``, ``movie_id`` and ``id`` always send lists. ``recently_created``
    and ``recently_updated`` count days back from *clock* (UTC by default).

    Example::

        KeywordSearchFilter(clock=FrozenClock(datetime(2024, 3, 31, tzinfo=UTC)))
            .recently_created(30)
            .get_filters()
        # {"createdAt": "gte:01.03.2024,lte:31.03.2024", "sortField": "createdAt", "sortType": -1}
    """

    explicit_eq: ClassVar[bool] = True
    _sort_style: SortStyle = SortStyle.PAIR

    def __init__(self, clock: Clock | None = None) -> None:
        self._filters = FilterMap()
        self._sort = SortCriteria()
        self._clock: Clock = clock or SystemClock()

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

    def title(self, titles: str | Iterable[str]) -> "KeywordSearchFilter":
        self._filters.set("title", as_list(titles))
        return self

    def search(self, text: str) -> "KeywordSearchFilter":
        """Keywords whose title contains *text*."""
        self._filters.set("title", regex_value(text))
        return self

    def movie_id(self, movie_ids: int | Iterable[int]) -> "KeywordSearchFilter":
        self._filters.set("movies.id", as_list(movie_ids))
        return self

    def movie_count(self, count: int, operator: str = "gte") -> "KeywordSearchFilter":
        return self.add_filter("movieCount", count, operator)

    def created_at(self, day: date | str) -> "KeywordSearchFilter":
        self._filters.set("createdAt", capabilities.wire_value(day))
        return self

    def updated_at(self, day: date | str) -> "KeywordSearchFilter":
        self._filters.set("updatedAt", capabilities.wire_value(day))
        return self

    def created_between(self, start: date | str | None, end: date | str | None) -> "KeywordSearchFilter":
        return self.add_range_filter("createdAt", start, end)

    def updated_between(self, start: date | str | None, end: date | str | None) -> "KeywordSearchFilter":
        return self.add_range_filter("updatedAt", start, end)

    def recently_created(self, days: int = 30) -> "KeywordSearchFilter":
        """Created in the last *days* days, newest first."""
        start, end = self._window(days)
        return self.created_between(start, end).sort_by_created_at("desc")

    def recently_updated(self, days: int = 7) -> "KeywordSearchFilter":
        """Updated in the last *days* days, most recent first."""
        start, end = self._window(days)
        return self.updated_between(start, end).sort_by_updated_at("desc")

    def only_popular(self) -> "KeywordSearchFilter":
        """Keywords attached to at least one movie, newest first."""
        return self.not_null_fields(["movies.id"]).sort_by_created_at("desc")

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def sort_by_id(self, direction: str = "asc") -> "KeywordSearchFilter":
        return capabilities.pair_sort(self, SortField.ID, direction)

    def sort_by_created_at(self, direction: str = "desc") -> "KeywordSearchFilter":
        return capabilities.pair_sort(self, SortField.CREATED_AT, direction)

    def sort_by_updated_at(self, direction: str = "desc") -> "KeywordSearchFilter":
        return capabilities.pair_sort(self, SortField.UPDATED_AT, direction)

    def sort_by_title(self, direction: str = "asc") -> "KeywordSearchFilter":
        return capabilities.dash_sort(self, SortField.TITLE, direction)

    def sort_by_popularity(self, direction: str = "desc") -> "KeywordSearchFilter":
        return capabilities.colon_sort(self, SortField.MOVIE_COUNT, direction)

    # ------------------------------------------------------------------

    def _window(self, days: int) -> tuple[date, date]:
        today = self._clock.today()
        start = today - timedelta(days=days)
        logger.debug("keyword_filter.window days=%d start=%s end=%s", days, start, today)
        return start, today

    def __repr__(self) -> str:
        return f"KeywordSearchFilter({self.get_filters()!r})"


__all__ = ["KeywordSearchFilter"]
