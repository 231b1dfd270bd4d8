"""Filters – fluent per-resource query builders for the kinopoisk.dev API."""
from kp_query.filters.image import ImageSearchFilter
from kp_query.filters.keyword import KeywordSearchFilter
from kp_query.filters.movie import MovieSearchFilter
from kp_query.filters.person import PersonSearchFilter
from kp_query.filters.review import ReviewSearchFilter
from kp_query.filters.season import SeasonSearchFilter
from kp_query.filters.studio import StudioSearchFilter
from kp_query.kernel.types import (
    ImageType,
    MovieStatus,
    MovieType,
    PersonProfession,
    PersonSex,
    RatingMpaa,
    RatingSource,
    ReviewType,
    StudioType,
)

__all__ = [
    "ImageSearchFilter",
    "ImageType",
    "KeywordSearchFilter",
    "MovieSearchFilter",
    "MovieStatus",
    "MovieType",
    "PersonProfession",
    "PersonSearchFilter",
    "PersonSex",
    "RatingMpaa",
    "RatingSource",
    "ReviewSearchFilter",
    "ReviewType",
    "SeasonSearchFilter",
    "StudioSearchFilter",
    "StudioType",
]
