"""Query – FilterMap, the ordered key→value accumulator behind every facade."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from kp_query.query.encoding.operators import as_list, not_equal_key

logger = logging.getLogger(__name__)

SELECT_FIELDS_KEY = "selectFields"


class FilterMap:
    """Insertion-ordered map of ``field[.operator]`` keys to wire values.

    Writing an existing key replaces its value in place; nothing is merged.
    Keys are not checked against the API schema.
    """

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> "FilterMap":
        if key in self._items and self._items[key] != value:
            logger.debug("filter_map.overwrite key=%s old=%r new=%r", key, self._items[key], value)
        self._items[key] = value
        return self

    def remove(self, key: str) -> "FilterMap":
        self._items.pop(key, None)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        return self._items.get(key, default)

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the current parameters in insertion order."""
        return dict(self._items)

    def reset(self) -> "FilterMap":
        self._items.clear()
        return self

    def not_null_fields(self, fields: Iterable[str] | str) -> "FilterMap":
        """Require each field to be non-null (``field.ne`` present, value ``None``).

        A single field name may be passed as a plain string.
        """
        for field in as_list(fields):
            self.set(not_equal_key(field), None)
        return self

    def select_fields(self, fields: Iterable[str] | str) -> "FilterMap":
        self.set(SELECT_FIELDS_KEY, " ".join(as_list(fields)))
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"FilterMap({self._items!r})"


__all__ = ["SELECT_FIELDS_KEY", "FilterMap"]
