"""Kernel types – closed vocabularies used as filter values.

Enum values are the exact strings the API stores, so they can be written
to a filter map unchanged.
"""
from __future__ import annotations

from enum import Enum


class RatingSource(str, Enum):
    """Rating / vote providers addressable as ``rating.<source>``."""

    KP = "kp"
    IMDB = "imdb"
    TMDB = "tmdb"
    FILM_CRITICS = "filmCritics"
    RUSSIAN_FILM_CRITICS = "russianFilmCritics"
    AWAIT = "await"

    @classmethod
    def values(cls) -> frozenset[str]:
        return frozenset(member.value for member in cls)


class MovieType(str, Enum):
    MOVIE = "movie"
    TV_SERIES = "tv-series"
    CARTOON = "cartoon"
    ANIME = "anime"
    ANIMATED_SERIES = "animated-series"
    TV_SHOW = "tv-show"

    @property
    def is_series(self) -> bool:
        return self in (MovieType.TV_SERIES, MovieType.ANIMATED_SERIES, MovieType.TV_SHOW)


class MovieStatus(str, Enum):
    FILMING = "filming"
    PRE_PRODUCTION = "pre-production"
    COMPLETED = "completed"
    ANNOUNCED = "announced"
    POST_PRODUCTION = "post-production"


class RatingMpaa(str, Enum):
    G = "g"
    PG = "pg"
    PG13 = "pg13"
    R = "r"
    NC17 = "nc17"


class PersonSex(str, Enum):
    MALE = "male"
    FEMALE = "female"


_PROFESSION_RU: dict[str, str] = {
    "actor": "актер",
    "director": "режиссер",
    "writer": "сценарист",
    "producer": "продюсер",
    "composer": "композитор",
    "operator": "оператор",
    "design": "художник",
    "editor": "монтажер",
    "voice_actor": "актер дубляжа",
    "other": "другое",
}


class PersonProfession(str, Enum):
    """Person professions.

    The API filters ``profession`` / ``persons.profession`` by the Russian
    name, exposed as :attr:`russian_name`.
    """

    ACTOR = "actor"
    DIRECTOR = "director"
    WRITER = "writer"
    PRODUCER = "producer"
    COMPOSER = "composer"
    OPERATOR = "operator"
    DESIGN = "design"
    EDITOR = "editor"
    VOICE_ACTOR = "voice_actor"
    OTHER = "other"

    @property
    def russian_name(self) -> str:
        return _PROFESSION_RU[self.value]

    @classmethod
    def from_russian_name(cls, name: str) -> "PersonProfession | None":
        for member in cls:
            if member.russian_name == name.strip().lower():
                return member
        return None


class StudioType(str, Enum):
    PRODUCTION = "Производство"
    SPECIAL_EFFECTS = "Спецэффекты"
    DISTRIBUTION = "Прокат"
    DUBBING_STUDIO = "Студия дубляжа"


class ReviewType(str, Enum):
    POSITIVE = "Позитивный"
    NEGATIVE = "Негативный"
    NEUTRAL = "Нейтральный"


class ImageType(str, Enum):
    BACKDROP = "backdrops"
    COVER = "cover"
    FRAME = "frame"
    PROMO = "promo"
    SCREENSHOT = "screenshot"
    SHOOTING = "shooting"
    STILL = "still"
    WALLPAPER = "wallpaper"


__all__ = [
    "ImageType",
    "MovieStatus",
    "MovieType",
    "PersonProfession",
    "PersonSex",
    "RatingMpaa",
    "RatingSource",
    "ReviewType",
    "StudioType",
]
