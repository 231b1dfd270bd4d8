"""Query encoding – field operators and value encodings.

Filters reach the API as ``field[.operator]=value`` query parameters::

    year=2023                    # implicit equality
    age.eq=30                    # explicit equality
    rating.kp=gte:7,lte:9        # range encoded in the value
    name.regex=Матрица           # regex as key suffix
    name=regex:Матрица           # regex encoded in the value
    poster.url.ne=               # "not null" by key presence
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any


class Operator(str, Enum):
    """Operator tokens understood as key suffixes."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    IN = "in"
    NIN = "nin"
    ALL = "all"
    REGEX = "regex"


DATE_FORMAT = "%d.%m.%Y"


def filter_key(field: str, operator: str | Operator = Operator.EQ, *, explicit_eq: bool = False) -> str:
    """Return the query key for *field* under *operator*.

    Equality is written as the bare field unless *explicit_eq* is set, in
    which case it gets the ``.eq`` suffix like every other operator.
    Unknown operators are appended unchanged.
    """
    op = operator.value if isinstance(operator, Operator) else str(operator)
    if op == Operator.EQ.value and not explicit_eq:
        return field
    return f"{field}.{op}"


def not_equal_key(field: str) -> str:
    return filter_key(field, Operator.NE)


def regex_key(field: str) -> str:
    return filter_key(field, Operator.REGEX)


def regex_value(value: Any) -> str:
    """Encode a regex/substring search into the value (``regex:<value>``)."""
    return f"{Operator.REGEX.value}:{value}"


def format_bound(value: Any) -> str:
    """Render one range bound.

    Integral floats drop the fraction so ``7.0`` matches the API's ``7``;
    dates use the API's ``dd.mm.yyyy`` format.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    return str(value)


def range_value(minimum: Any = None, maximum: Any = None) -> str | None:
    """Encode an inclusive range into a single filter value.

    ``range_value(2020, 2023)`` → ``"gte:2020,lte:2023"``; a missing bound
    drops its half. Returns ``None`` when both bounds are missing.
    """
    parts: list[str] = []
    if minimum is not None:
        parts.append(f"{Operator.GTE.value}:{format_bound(minimum)}")
    if maximum is not None:
        parts.append(f"{Operator.LTE.value}:{format_bound(maximum)}")
    return ",".join(parts) or None


def scalar(value: Any) -> Any:
    """Unwrap enum members to their wire value."""
    return value.value if isinstance(value, Enum) else value


def as_list(value: Any) -> list[Any]:
    """Normalise "one item or many" into a list of wire values."""
    if value is None:
        return []
    if isinstance(value, (str, bytes, Enum)) or not isinstance(value, Iterable):
        return [scalar(value)]
    return [scalar(item) for item in value]


__all__ = [
    "DATE_FORMAT",
    "Operator",
    "as_list",
    "filter_key",
    "format_bound",
    "not_equal_key",
    "range_value",
    "regex_key",
    "regex_value",
    "scalar",
]
