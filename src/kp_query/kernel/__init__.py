"""Kernel – framework-agnostic building blocks."""

from kp_query.kernel.errors import BaseError, DomainError, ValidationError
from kp_query.kernel.time import Clock, FrozenClock, SystemClock
from kp_query.kernel.types import RatingSource

__all__ = [
    "BaseError",
    "Clock",
    "DomainError",
    "FrozenClock",
    "RatingSource",
    "SystemClock",
    "ValidationError",
]
