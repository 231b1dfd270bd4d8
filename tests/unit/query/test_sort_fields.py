"""Unit tests for SortDirection and the SortField catalog."""

from __future__ import annotations

import pytest

from kp_query.kernel.errors import ValidationError
from kp_query.query.sorting import SortDataType, SortDirection, SortField


# ---------------------------------------------------------------------------
# SortDirection
# ---------------------------------------------------------------------------


class TestSortDirection:
    def test_numeric(self) -> None:
        assert SortDirection.ASC.numeric == 1
        assert SortDirection.DESC.numeric == -1

    def test_reverse(self) -> None:
        assert SortDirection.ASC.reverse() is SortDirection.DESC
        assert SortDirection.DESC.reverse() is SortDirection.ASC

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("asc", SortDirection.ASC),
            ("ASC", SortDirection.ASC),
            (" desc ", SortDirection.DESC),
            ("1", SortDirection.ASC),
            ("+1", SortDirection.ASC),
            ("-1", SortDirection.DESC),
            (1, SortDirection.ASC),
            (-1, SortDirection.DESC),
            (1.0, SortDirection.ASC),
            (SortDirection.DESC, SortDirection.DESC),
        ],
    )
    def test_parse(self, raw: object, expected: SortDirection) -> None:
        assert SortDirection.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, True, False, 0, 2, "up", "", 0.5])
    def test_parse_rejects(self, raw: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SortDirection.parse(raw)
        assert exc_info.value.detail["field"] == "direction"


# ---------------------------------------------------------------------------
# SortField
# ---------------------------------------------------------------------------


class TestSortField:
    def test_wire_name(self) -> None:
        assert SortField.RATING_KP.wire_name == "rating.kp"
        assert SortField.FEES_WORLD.wire_name == "fees.world.value"

    def test_every_member_has_metadata(self) -> None:
        for member in SortField:
            assert member.description
            assert isinstance(member.data_type, SortDataType)
            assert isinstance(member.default_direction, SortDirection)

    @pytest.mark.parametrize(
        ("field", "direction"),
        [
            (SortField.RATING_KP, SortDirection.DESC),
            (SortField.VOTES_IMDB, SortDirection.DESC),
            (SortField.YEAR, SortDirection.DESC),
            (SortField.CREATED_AT, SortDirection.DESC),
            (SortField.MOVIE_COUNT, SortDirection.DESC),
            (SortField.NAME, SortDirection.ASC),
            (SortField.TITLE, SortDirection.ASC),
            (SortField.MOVIE_LENGTH, SortDirection.ASC),
            (SortField.TOP_250, SortDirection.ASC),
        ],
    )
    def test_default_direction(self, field: SortField, direction: SortDirection) -> None:
        assert field.default_direction is direction

    def test_rating_fields(self) -> None:
        fields = SortField.rating_fields()
        assert len(fields) == 6
        assert all(f.is_rating_field and f.is_numeric_field for f in fields)

    def test_votes_fields(self) -> None:
        fields = SortField.votes_fields()
        assert SortField.VOTES_KP in fields
        assert SortField.RATING_KP not in fields

    def test_date_fields(self) -> None:
        assert SortField.PREMIERE_RUSSIA.is_date_field
        assert SortField.UPDATED_AT.is_date_field
        assert not SortField.YEAR.is_date_field

    def test_string_fields(self) -> None:
        assert SortField.NAME.data_type is SortDataType.STRING
        assert not SortField.NAME.is_numeric_field

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (SortField.YEAR, SortField.YEAR),
            ("rating.imdb", SortField.RATING_IMDB),
            ("movieCount", SortField.MOVIE_COUNT),
            ("RATING_KP", SortField.RATING_KP),
            ("top250", SortField.TOP_250),
            ("en_name", SortField.EN_NAME),
        ],
    )
    def test_parse(self, raw: object, expected: SortField) -> None:
        assert SortField.parse(raw) is expected

    @pytest.mark.parametrize("raw", [None, "popularity", "rating", 7])
    def test_parse_rejects(self, raw: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SortField.parse(raw)
        assert exc_info.value.detail["field"] == "field"
