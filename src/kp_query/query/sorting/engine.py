"""Query sorting – SortCriteria, the ordered multi-field sort builder."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from kp_query.query.sorting.criteria import (
    DEFAULT_DIRECTION,
    SortCriterion,
    colon_token,
    dash_token,
    numeric_pair,
)
from kp_query.query.sorting.fields import SortDirection, SortField

logger = logging.getLogger(__name__)


class SortCriteria:
    """Ordered list of sort criteria; the first entry is the primary key.

    Each field appears at most once. Re-adding a field replaces its
    direction without moving it.

    Example::

        sort = SortCriteria().add_sort(SortField.RATING_KP).add_sort("year", "asc")
        sort.to_dash_string()   # "-rating.kp,year"
        sort.to_colon_string()  # "rating.kp:desc,year:asc"
    """

    def __init__(self, criteria: Iterable[SortCriterion] = ()) -> None:
        self._criteria: list[SortCriterion] = []
        for criterion in criteria:
            self._put(criterion)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_sort(self, field: SortField | str, direction: SortDirection | str | int = DEFAULT_DIRECTION) -> "SortCriteria":
        """Append *field*, or update it in place if already present.

        Omitting *direction* uses the field's default; passing ``None``
        explicitly raises :class:`~kp_query.kernel.errors.ValidationError`.
        """
        self._put(SortCriterion.of(field, direction))
        return self

    def add_criterion(self, criterion: SortCriterion) -> "SortCriteria":
        self._put(criterion)
        return self

    def toggle(self, field: SortField | str) -> "SortCriteria":
        """Flip the direction of *field*.

        An absent field is added with the opposite of its default direction.
        """
        sort_field = SortField.parse(field)
        index = self._index_of(sort_field)
        if index is None:
            self._criteria.append(SortCriterion(sort_field, sort_field.default_direction.reverse()))
        else:
            self._criteria[index] = self._criteria[index].reverse()
        return self

    def remove_by(self, field: SortField | str) -> "SortCriteria":
        sort_field = SortField.parse(field)
        self._criteria = [c for c in self._criteria if c.field is not sort_field]
        return self

    def clear(self) -> "SortCriteria":
        self._criteria.clear()
        return self

    def add_multiple(self, tokens: Iterable[str | SortCriterion]) -> "SortCriteria":
        """Apply ``"field"`` / ``"field:direction"`` tokens left to right.

        Tokens are all parsed before any is applied, so an invalid token
        leaves the criteria untouched.
        """
        if isinstance(tokens, str):
            tokens = [tokens]
        parsed = [t if isinstance(t, SortCriterion) else SortCriterion.from_token(t) for t in tokens]
        for criterion in parsed:
            self._put(criterion)
        return self

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def has_sort_by(self, field: SortField | str) -> bool:
        return self._index_of(SortField.parse(field)) is not None

    def get_direction(self, field: SortField | str) -> SortDirection | None:
        index = self._index_of(SortField.parse(field))
        return None if index is None else self._criteria[index].direction

    def count(self) -> int:
        return len(self._criteria)

    @property
    def criteria(self) -> tuple[SortCriterion, ...]:
        return tuple(self._criteria)

    @property
    def first(self) -> SortCriterion | None:
        return self._criteria[0] if self._criteria else None

    @property
    def last(self) -> SortCriterion | None:
        return self._criteria[-1] if self._criteria else None

    def is_empty(self) -> bool:
        return not self._criteria

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def export_criteria(self) -> list[dict[str, str]]:
        return [criterion.to_dict() for criterion in self._criteria]

    def import_criteria(self, data: Iterable[Mapping[str, Any]] | Mapping[str, Any]) -> "SortCriteria":
        """Replace the criteria with *data*.

        Accepts ``{"field", "direction"}`` or ``{"sortField", "sortType"}``
        records (a single mapping is treated as one record). Every record is
        validated before the current criteria are replaced.
        """
        records = [data] if isinstance(data, Mapping) else list(data)
        parsed = [SortCriterion.from_dict(record) for record in records]
        self._criteria.clear()
        for criterion in parsed:
            self._put(criterion)
        logger.debug("sort_criteria.imported count=%d", len(self._criteria))
        return self

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_numeric_params(self) -> dict[str, Any]:
        """Numeric ``sortField``/``sortType`` pair for the primary criterion.

        The numeric form carries one criterion; secondary criteria are
        not sent. Use :meth:`to_dash_string` or :meth:`to_colon_string`
        to send all of them.
        """
        if not self._criteria:
            return {}
        if len(self._criteria) > 1:
            logger.debug("sort_criteria.numeric_primary_only dropped=%d", len(self._criteria) - 1)
        return numeric_pair(self._criteria[0])

    def to_dash_string(self) -> str | None:
        if not self._criteria:
            return None
        return ",".join(dash_token(c) for c in self._criteria)

    def to_colon_string(self) -> str | None:
        if not self._criteria:
            return None
        return ",".join(colon_token(c) for c in self._criteria)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _index_of(self, field: SortField) -> int | None:
        for index, criterion in enumerate(self._criteria):
            if criterion.field is field:
                return index
        return None

    def _put(self, criterion: SortCriterion) -> None:
        index = self._index_of(criterion.field)
        if index is None:
            self._criteria.append(criterion)
        else:
            self._criteria[index] = criterion

    def __len__(self) -> int:
        return len(self._criteria)

    def __iter__(self) -> Iterator[SortCriterion]:
        return iter(self._criteria)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortCriteria):
            return NotImplemented
        return self._criteria == other._criteria

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SortCriteria({self.export_criteria()!r})"


__all__ = ["SortCriteria"]
