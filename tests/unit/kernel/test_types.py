"""Unit tests for kernel vocabularies."""

from __future__ import annotations

import pytest

from kp_query.kernel.types import (
    ImageType,
    MovieType,
    PersonProfession,
    RatingSource,
    ReviewType,
    StudioType,
)


class TestRatingSource:
    def test_values(self) -> None:
        assert RatingSource.values() == frozenset(
            {"kp", "imdb", "tmdb", "filmCritics", "russianFilmCritics", "await"}
        )

    def test_is_str(self) -> None:
        assert RatingSource.IMDB == "imdb"


class TestMovieType:
    @pytest.mark.parametrize(
        ("movie_type", "expected"),
        [
            (MovieType.MOVIE, False),
            (MovieType.CARTOON, False),
            (MovieType.TV_SERIES, True),
            (MovieType.ANIMATED_SERIES, True),
        ],
    )
    def test_is_series(self, movie_type: MovieType, expected: bool) -> None:
        assert movie_type.is_series is expected


class TestPersonProfession:
    def test_russian_name(self) -> None:
        assert PersonProfession.ACTOR.russian_name == "актер"
        assert PersonProfession.DIRECTOR.russian_name == "режиссер"
        assert PersonProfession.WRITER.russian_name == "сценарист"

    def test_every_member_has_russian_name(self) -> None:
        for member in PersonProfession:
            assert member.russian_name

    def test_from_russian_name(self) -> None:
        assert PersonProfession.from_russian_name("Режиссер ") is PersonProfession.DIRECTOR

    def test_from_russian_name_unknown(self) -> None:
        assert PersonProfession.from_russian_name("космонавт") is None


class TestWireValues:
    def test_studio_type(self) -> None:
        assert StudioType.DUBBING_STUDIO.value == "Студия дубляжа"

    def test_review_type(self) -> None:
        assert ReviewType.POSITIVE.value == "Позитивный"

    def test_image_type(self) -> None:
        assert ImageType.COVER.value == "cover"
        assert ImageType("still") is ImageType.STILL
