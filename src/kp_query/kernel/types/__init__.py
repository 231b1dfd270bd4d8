"""Kernel types – API vocabularies."""
from kp_query.kernel.types.vocabulary import (
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
