"""Query sorting – SortCriterion and its wire encodings.

Two serialisations coexist and are chosen per call site:

* numeric pair – ``sortField=rating.kp&sortType=-1``
* composite string – ``sort=<token>[,<token>...]`` where a token is
  either dash style (``title`` / ``-title``) or colon style
  (``movieCount:asc`` / ``movieCount:desc``).

The numeric pair carries one criterion; multi-criterion sorts use the
composite string.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from kp_query.kernel.errors import ValidationError
from kp_query.query.sorting.fields import SortDirection, SortField

SORT_FIELD_KEY = "sortField"
SORT_TYPE_KEY = "sortType"
SORT_KEY = "sort"

# Sentinel: "use the field's default direction"; ``None`` is rejected instead.
DEFAULT_DIRECTION: Any = object()


@dataclasses.dataclass(frozen=True, slots=True)
class SortCriterion:
    """One ``(field, direction)`` pair."""

    field: SortField
    direction: SortDirection

    @classmethod
    def of(cls, field: Any, direction: Any = DEFAULT_DIRECTION) -> "SortCriterion":
        """Build a criterion from loose input; an omitted direction uses the field default."""
        sort_field = SortField.parse(field)
        if direction is DEFAULT_DIRECTION:
            return cls(sort_field, sort_field.default_direction)
        return cls(sort_field, SortDirection.parse(direction))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SortCriterion":
        """Parse ``{"field", "direction"}`` or ``{"sortField", "sortType"}``."""
        if not isinstance(data, Mapping):
            raise ValidationError.for_field("criterion", data, "expected a mapping")
        if "field" in data:
            field, direction = data["field"], data.get("direction", DEFAULT_DIRECTION)
        elif SORT_FIELD_KEY in data:
            field, direction = data[SORT_FIELD_KEY], data.get(SORT_TYPE_KEY, DEFAULT_DIRECTION)
        else:
            raise ValidationError.for_field("field", None, "sort field is required")
        return cls.of(field, direction)

    @classmethod
    def from_token(cls, token: str) -> "SortCriterion":
        """Parse ``"field"`` or ``"field:direction"``."""
        field, sep, direction = token.strip().partition(":")
        if not sep:
            return cls.of(field)
        return cls.of(field, direction)

    def reverse(self) -> "SortCriterion":
        return SortCriterion(self.field, self.direction.reverse())

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field.value, "direction": self.direction.value}

    def __str__(self) -> str:
        return f"{self.field.description} ({self.direction.value})"


def numeric_pair(criterion: SortCriterion) -> dict[str, Any]:
    """``{"sortField": <wire>, "sortType": 1 | -1}``."""
    return {SORT_FIELD_KEY: criterion.field.value, SORT_TYPE_KEY: criterion.direction.numeric}


def dash_token(criterion: SortCriterion) -> str:
    """``name`` when ascending, ``-name`` when descending."""
    prefix = "-" if criterion.direction is SortDirection.DESC else ""
    return prefix + criterion.field.value


def colon_token(criterion: SortCriterion) -> str:
    """``name:asc`` / ``name:desc``; the direction is always written."""
    return f"{criterion.field.value}:{criterion.direction.value}"


class SortStyle(str, Enum):
    """How a single-sort endpoint spells its one criterion."""

    DASH = "dash"    # sort=-title
    COLON = "colon"  # sort=movieCount:desc
    PAIR = "pair"    # sortField=id&sortType=1

    def params(self, criterion: SortCriterion) -> dict[str, Any]:
        if self is SortStyle.PAIR:
            return numeric_pair(criterion)
        token = colon_token(criterion) if self is SortStyle.COLON else dash_token(criterion)
        return {SORT_KEY: token}


__all__ = [
    "DEFAULT_DIRECTION",
    "SORT_FIELD_KEY",
    "SORT_KEY",
    "SORT_TYPE_KEY",
    "SortCriterion",
    "SortStyle",
    "colon_token",
    "dash_token",
    "numeric_pair",
]
