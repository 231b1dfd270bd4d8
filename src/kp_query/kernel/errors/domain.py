"""Domain errors – rejected query-building input."""

from __future__ import annotations

from typing import Any

from kp_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a query-building rule is violated."""

    default_code = "domain_error"
    default_message = "query-building rule violated"


class ValidationError(DomainError):
    """Input does not meet validation rules.

    ``errors`` is a list of field-level failures, each a dict with at least
    a ``field`` and a ``reason`` key.
    """

    default_code = "validation_error"
    default_message = "invalid filter or sort input"

    def __init__(
        self,
        message: str | None = None,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @classmethod
    def for_field(cls, field: str, value: Any, reason: str) -> "ValidationError":
        """Build an error describing a single rejected value."""
        return cls(
            f"Invalid value {value!r} for {field}: {reason}",
            detail={"field": field, "value": value},
            errors=[{"field": field, "reason": reason}],
        )

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = ["DomainError", "ValidationError"]
