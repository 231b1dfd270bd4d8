"""Query – PageRequest, the page/limit pair appended to every list request."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from kp_query.config.settings import API_MAX_LIMIT, QuerySettings
from kp_query.kernel.errors import ValidationError

PAGE_KEY = "page"
LIMIT_KEY = "limit"


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset pagination parameters (1-based page, at most 250 items)."""

    page: int = 1
    limit: int = 10
    max_limit: int = dataclasses.field(default=API_MAX_LIMIT, repr=False)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field(PAGE_KEY, self.page, "page must be >= 1")
        if not 1 <= self.limit <= self.max_limit:
            raise ValidationError.for_field(
                LIMIT_KEY, self.limit, f"limit must be between 1 and {self.max_limit}"
            )

    @classmethod
    def from_settings(cls, settings: QuerySettings, page: int = 1) -> "PageRequest":
        return cls(page=page, limit=settings.default_limit, max_limit=settings.max_limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def next(self) -> "PageRequest":
        return dataclasses.replace(self, page=self.page + 1)

    def apply(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Return *params* with ``page`` and ``limit`` set; *params* is not modified."""
        return {**params, PAGE_KEY: self.page, LIMIT_KEY: self.limit}


__all__ = ["LIMIT_KEY", "PAGE_KEY", "PageRequest"]
