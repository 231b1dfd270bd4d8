"""Unit tests for query encoding – operators and value encoders."""

from __future__ import annotations

from datetime import date
from enum import Enum

import pytest

from kp_query.kernel.types import MovieType
from kp_query.query.encoding import (
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


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class TestFilterKey:
    def test_implicit_equality_is_bare_field(self) -> None:
        assert filter_key("year") == "year"
        assert filter_key("year", "eq") == "year"

    def test_explicit_equality(self) -> None:
        assert filter_key("age", Operator.EQ, explicit_eq=True) == "age.eq"

    @pytest.mark.parametrize("op", ["ne", "gt", "gte", "lt", "lte", "in", "nin", "all", "regex"])
    def test_operator_suffix(self, op: str) -> None:
        assert filter_key("rating.kp", op) == f"rating.kp.{op}"

    def test_enum_operator(self) -> None:
        assert filter_key("width", Operator.GTE) == "width.gte"

    def test_unknown_operator_passes_through(self) -> None:
        assert filter_key("year", "between") == "year.between"

    def test_not_equal_key(self) -> None:
        assert not_equal_key("poster.url") == "poster.url.ne"

    def test_regex_key(self) -> None:
        assert regex_key("description") == "description.regex"


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestRegexValue:
    def test_prefixes_value(self) -> None:
        assert regex_value("Матрица") == "regex:Матрица"


class TestFormatBound:
    def test_integral_float_drops_fraction(self) -> None:
        assert format_bound(7.0) == "7"

    def test_fractional_float(self) -> None:
        assert format_bound(7.5) == "7.5"

    def test_int(self) -> None:
        assert format_bound(2020) == "2020"

    def test_date(self) -> None:
        assert format_bound(date(2023, 1, 5)) == "05.01.2023"

    def test_bool(self) -> None:
        assert format_bound(True) == "true"

    def test_enum(self) -> None:
        assert format_bound(MovieType.ANIME) == "anime"

    def test_string_unchanged(self) -> None:
        assert format_bound("01.01.2020") == "01.01.2020"


class TestRangeValue:
    def test_both_bounds(self) -> None:
        assert range_value(2020, 2023) == "gte:2020,lte:2023"

    def test_lower_only(self) -> None:
        assert range_value(7.5, None) == "gte:7.5"

    def test_upper_only(self) -> None:
        assert range_value(None, 250) == "lte:250"

    def test_no_bounds(self) -> None:
        assert range_value() is None

    def test_zero_is_a_bound(self) -> None:
        assert range_value(0, 0) == "gte:0,lte:0"

    def test_dates(self) -> None:
        assert range_value(date(2024, 3, 1), date(2024, 3, 31)) == "gte:01.03.2024,lte:31.03.2024"


class TestScalarAndAsList:
    def test_scalar_unwraps_enum(self) -> None:
        assert scalar(MovieType.MOVIE) == "movie"

    def test_scalar_keeps_plain_values(self) -> None:
        assert scalar(5) == 5
        assert scalar(None) is None

    def test_as_list_none(self) -> None:
        assert as_list(None) == []

    def test_as_list_single_int(self) -> None:
        assert as_list(42) == [42]

    def test_as_list_single_string_not_split(self) -> None:
        assert as_list("драма") == ["драма"]

    def test_as_list_iterable(self) -> None:
        assert as_list((1, 2, 3)) == [1, 2, 3]

    def test_as_list_enum_members(self) -> None:
        assert as_list([MovieType.MOVIE, "anime"]) == ["movie", "anime"]

    def test_as_list_single_enum(self) -> None:
        class Colour(str, Enum):
            RED = "red"

        assert as_list(Colour.RED) == ["red"]
