"""Unit tests for KeywordSearchFilter."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from kp_query.filters import KeywordSearchFilter
from kp_query.kernel.time import FrozenClock
from kp_query.query.sorting import SortField


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 3, 31, 10, 0, tzinfo=UTC))


@pytest.fixture()
def f(clock: FrozenClock) -> KeywordSearchFilter:
    return KeywordSearchFilter(clock=clock)


class TestKeywordFilters:
    def test_title_always_list(self, f: KeywordSearchFilter) -> None:
        assert f.title("драка").get_filters() == {"title": ["драка"]}

    def test_title_many(self, f: KeywordSearchFilter) -> None:
        assert f.title(["драка", "погоня"]).get_filters() == {"title": ["драка", "погоня"]}

    def test_search(self, f: KeywordSearchFilter) -> None:
        assert f.search("пого").get_filters() == {"title": "regex:пого"}

    def test_movie_id(self, f: KeywordSearchFilter) -> None:
        assert f.movie_id(301).get_filters() == {"movies.id": [301]}

    def test_id(self, f: KeywordSearchFilter) -> None:
        assert f.id([1, 2]).get_filters() == {"id": [1, 2]}

    def test_movie_count(self, f: KeywordSearchFilter) -> None:
        assert f.movie_count(10).get_filters() == {"movieCount.gte": 10}

    def test_movie_count_eq_is_explicit(self, f: KeywordSearchFilter) -> None:
        assert f.movie_count(3, "eq").get_filters() == {"movieCount.eq": 3}

    def test_created_at(self, f: KeywordSearchFilter) -> None:
        assert f.created_at(date(2024, 1, 2)).get_filters() == {"createdAt": "02.01.2024"}

    def test_updated_at_string(self, f: KeywordSearchFilter) -> None:
        assert f.updated_at("05.02.2024").get_filters() == {"updatedAt": "05.02.2024"}

    def test_created_between(self, f: KeywordSearchFilter) -> None:
        params = f.created_between(date(2024, 1, 1), date(2024, 1, 31)).get_filters()
        assert params == {"createdAt": "gte:01.01.2024,lte:31.01.2024"}

    def test_updated_between_open(self, f: KeywordSearchFilter) -> None:
        assert f.updated_between(None, "01.02.2024").get_filters() == {"updatedAt": "lte:01.02.2024"}

    def test_only_popular(self, f: KeywordSearchFilter) -> None:
        assert f.only_popular().get_filters() == {
            "movies.id.ne": None,
            "sortField": "createdAt",
            "sortType": -1,
        }


class TestRecentWindows:
    def test_recently_created_default(self, f: KeywordSearchFilter) -> None:
        assert f.recently_created().get_filters() == {
            "createdAt": "gte:01.03.2024,lte:31.03.2024",
            "sortField": "createdAt",
            "sortType": -1,
        }

    def test_recently_updated_default(self, f: KeywordSearchFilter) -> None:
        assert f.recently_updated().get_filters() == {
            "updatedAt": "gte:24.03.2024,lte:31.03.2024",
            "sortField": "updatedAt",
            "sortType": -1,
        }

    def test_window_follows_clock(self, f: KeywordSearchFilter, clock: FrozenClock) -> None:
        clock.advance(days=1)
        assert f.recently_updated(1).get_filters()["updatedAt"] == "gte:31.03.2024,lte:01.04.2024"

    def test_system_clock_default(self) -> None:
        params = KeywordSearchFilter().recently_created(0).get_filters()
        assert params["createdAt"].startswith("gte:")


class TestKeywordSorting:
    def test_sort_by_id_numeric_pair(self, f: KeywordSearchFilter) -> None:
        assert f.sort_by_id().get_filters() == {"sortField": "id", "sortType": 1}

    def test_sort_by_id_desc(self, f: KeywordSearchFilter) -> None:
        assert f.sort_by_id("desc").get_filters() == {"sortField": "id", "sortType": -1}

    def test_sort_by_updated_at(self, f: KeywordSearchFilter) -> None:
        assert f.sort_by_updated_at("asc").get_filters() == {"sortField": "updatedAt", "sortType": 1}

    def test_sort_by_title_dash(self, f: KeywordSearchFilter) -> None:
        assert f.sort_by_title().get_filters() == {"sort": "title"}
        assert f.sort_by_title("desc").get_filters() == {"sort": "-title"}

    def test_sort_by_popularity_colon(self, f: KeywordSearchFilter) -> None:
        assert f.sort_by_popularity().get_filters() == {"sort": "movieCount:desc"}
        assert f.sort_by_popularity("asc").get_filters() == {"sort": "movieCount:asc"}

    def test_switching_convention_drops_previous_sort(self, f: KeywordSearchFilter) -> None:
        f.sort_by_created_at().sort_by_title()
        assert f.get_filters() == {"sort": "title"}
        f.sort_by_id()
        assert f.get_filters() == {"sortField": "id", "sortType": 1}

    def test_removing_pair_param_clears_criteria(self, f: KeywordSearchFilter) -> None:
        f.sort_by_id().remove_filter("sortField")
        assert f.sort_criteria.is_empty()
        assert f.get_filters() == {}

    def test_params_follow_sort_criteria(self, f: KeywordSearchFilter) -> None:
        f.sort_criteria.add_sort(SortField.UPDATED_AT, "asc")
        assert f.get_filters() == {"sortField": "updatedAt", "sortType": 1}

    def test_only_primary_criterion_is_sent(self, f: KeywordSearchFilter) -> None:
        f.sort_by_title()
        f.sort_criteria.add_sort(SortField.MOVIE_COUNT)
        assert f.get_filters() == {"sort": "title"}

    def test_reset(self, f: KeywordSearchFilter) -> None:
        assert f.recently_created().reset().get_filters() == {}
