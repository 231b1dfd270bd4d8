"""Query sorting – SortDirection and the closed SortField catalog."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from kp_query.kernel.errors import ValidationError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def numeric(self) -> int:
        """Numeric wire form used by ``sortType``."""
        return 1 if self is SortDirection.ASC else -1

    def reverse(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @classmethod
    def parse(cls, value: Any) -> "SortDirection":
        """Coerce ``asc``/``desc`` (any case), ``1``/``-1`` or ``"+1"``/``"-1"``.

        Raises :class:`ValidationError` for anything else, including
        ``None``, booleans and numbers other than ``±1``.
        """
        if isinstance(value, SortDirection):
            return value
        if value is None or isinstance(value, bool):
            raise ValidationError.for_field("direction", value, "sort direction is required")
        if isinstance(value, (int, float)):
            if value == 1:
                return cls.ASC
            if value == -1:
                return cls.DESC
            raise ValidationError.for_field("direction", value, "numeric direction must be 1 or -1")
        if isinstance(value, str):
            token = value.strip().lower()
            if token in ("asc", "1", "+1"):
                return cls.ASC
            if token in ("desc", "-1"):
                return cls.DESC
        raise ValidationError.for_field("direction", value, "expected 'asc', 'desc', 1 or -1")


class SortDataType(str, Enum):
    NUMBER = "number"
    DATE = "date"
    STRING = "string"


@dataclasses.dataclass(frozen=True, slots=True)
class SortFieldInfo:
    data_type: SortDataType
    default_direction: SortDirection
    description: str


class SortField(str, Enum):
    """Fields the API can sort by; the value is the wire name."""

    ID = "id"
    NAME = "name"
    EN_NAME = "enName"
    ALTERNATIVE_NAME = "alternativeName"
    TITLE = "title"
    TYPE = "type"
    YEAR = "year"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    RATING_KP = "rating.kp"
    RATING_IMDB = "rating.imdb"
    RATING_TMDB = "rating.tmdb"
    RATING_FILM_CRITICS = "rating.filmCritics"
    RATING_RUSSIAN_FILM_CRITICS = "rating.russianFilmCritics"
    RATING_AWAIT = "rating.await"

    VOTES_KP = "votes.kp"
    VOTES_IMDB = "votes.imdb"
    VOTES_TMDB = "votes.tmdb"
    VOTES_FILM_CRITICS = "votes.filmCritics"
    VOTES_RUSSIAN_FILM_CRITICS = "votes.russianFilmCritics"
    VOTES_AWAIT = "votes.await"

    MOVIE_LENGTH = "movieLength"
    SERIES_LENGTH = "seriesLength"
    TOTAL_SERIES_LENGTH = "totalSeriesLength"
    AGE_RATING = "ageRating"
    TOP_10 = "top10"
    TOP_250 = "top250"

    PREMIERE_WORLD = "premiere.world"
    PREMIERE_RUSSIA = "premiere.russia"
    PREMIERE_USA = "premiere.usa"

    BUDGET = "budget.value"
    FEES_WORLD = "fees.world.value"
    MOVIE_COUNT = "movieCount"

    @property
    def wire_name(self) -> str:
        return self.value

    @property
    def info(self) -> SortFieldInfo:
        return _CATALOG[self]

    @property
    def data_type(self) -> SortDataType:
        return _CATALOG[self].data_type

    @property
    def default_direction(self) -> SortDirection:
        return _CATALOG[self].default_direction

    @property
    def description(self) -> str:
        return _CATALOG[self].description

    @property
    def is_rating_field(self) -> bool:
        return self.value.startswith("rating.")

    @property
    def is_votes_field(self) -> bool:
        return self.value.startswith("votes.")

    @property
    def is_date_field(self) -> bool:
        return self.data_type is SortDataType.DATE

    @property
    def is_numeric_field(self) -> bool:
        return self.data_type is SortDataType.NUMBER

    @classmethod
    def rating_fields(cls) -> tuple["SortField", ...]:
        return tuple(f for f in cls if f.is_rating_field)

    @classmethod
    def votes_fields(cls) -> tuple["SortField", ...]:
        return tuple(f for f in cls if f.is_votes_field)

    @classmethod
    def parse(cls, value: Any) -> "SortField":
        """Resolve a member, wire name (``"rating.kp"``) or member name (``"RATING_KP"``).

        Raises :class:`ValidationError` when *value* is not in the catalog.
        """
        if isinstance(value, SortField):
            return value
        if value is None:
            raise ValidationError.for_field("field", value, "sort field is required")
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                member = cls.__members__.get(value.upper())
                if member is not None:
                    return member
        raise ValidationError.for_field("field", value, "unknown sort field")


_N, _D, _S = SortDataType.NUMBER, SortDataType.DATE, SortDataType.STRING
_ASC, _DESC = SortDirection.ASC, SortDirection.DESC

_CATALOG: dict[SortField, SortFieldInfo] = {
    SortField.ID: SortFieldInfo(_N, _DESC, "ID"),
    SortField.NAME: SortFieldInfo(_S, _ASC, "Name (Russian)"),
    SortField.EN_NAME: SortFieldInfo(_S, _ASC, "Name (English)"),
    SortField.ALTERNATIVE_NAME: SortFieldInfo(_S, _ASC, "Alternative name"),
    SortField.TITLE: SortFieldInfo(_S, _ASC, "Title"),
    SortField.TYPE: SortFieldInfo(_S, _ASC, "Type"),
    SortField.YEAR: SortFieldInfo(_N, _DESC, "Release year"),
    SortField.CREATED_AT: SortFieldInfo(_D, _DESC, "Created at"),
    SortField.UPDATED_AT: SortFieldInfo(_D, _DESC, "Updated at"),
    SortField.RATING_KP: SortFieldInfo(_N, _DESC, "Kinopoisk rating"),
    SortField.RATING_IMDB: SortFieldInfo(_N, _DESC, "IMDb rating"),
    SortField.RATING_TMDB: SortFieldInfo(_N, _DESC, "TMDB rating"),
    SortField.RATING_FILM_CRITICS: SortFieldInfo(_N, _DESC, "Film critics rating"),
    SortField.RATING_RUSSIAN_FILM_CRITICS: SortFieldInfo(_N, _DESC, "Russian film critics rating"),
    SortField.RATING_AWAIT: SortFieldInfo(_N, _DESC, "Await rating"),
    SortField.VOTES_KP: SortFieldInfo(_N, _DESC, "Kinopoisk votes"),
    SortField.VOTES_IMDB: SortFieldInfo(_N, _DESC, "IMDb votes"),
    SortField.VOTES_TMDB: SortFieldInfo(_N, _DESC, "TMDB votes"),
    SortField.VOTES_FILM_CRITICS: SortFieldInfo(_N, _DESC, "Film critics votes"),
    SortField.VOTES_RUSSIAN_FILM_CRITICS: SortFieldInfo(_N, _DESC, "Russian film critics votes"),
    SortField.VOTES_AWAIT: SortFieldInfo(_N, _DESC, "Await votes"),
    SortField.MOVIE_LENGTH: SortFieldInfo(_N, _ASC, "Movie length"),
    SortField.SERIES_LENGTH: SortFieldInfo(_N, _ASC, "Episode length"),
    SortField.TOTAL_SERIES_LENGTH: SortFieldInfo(_N, _ASC, "Total series length"),
    SortField.AGE_RATING: SortFieldInfo(_N, _ASC, "Age rating"),
    SortField.TOP_10: SortFieldInfo(_N, _ASC, "Top-10 position"),
    SortField.TOP_250: SortFieldInfo(_N, _ASC, "Top-250 position"),
    SortField.PREMIERE_WORLD: SortFieldInfo(_D, _DESC, "World premiere"),
    SortField.PREMIERE_RUSSIA: SortFieldInfo(_D, _DESC, "Russian premiere"),
    SortField.PREMIERE_USA: SortFieldInfo(_D, _DESC, "US premiere"),
    SortField.BUDGET: SortFieldInfo(_N, _DESC, "Budget"),
    SortField.FEES_WORLD: SortFieldInfo(_N, _DESC, "Worldwide box office"),
    SortField.MOVIE_COUNT: SortFieldInfo(_N, _DESC, "Number of movies"),
}


__all__ = ["SortDataType", "SortDirection", "SortField", "SortFieldInfo"]
