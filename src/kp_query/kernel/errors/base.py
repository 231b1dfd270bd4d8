"""Root error class for the kp-query error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error raised while building query parameters.

    Args:
        message: Human-readable description; ``default_message`` when omitted.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: The rejected input, e.g. ``{"field": "direction", "value": "up"}``.
        cause: Original exception that triggered this error.

    ``str()`` renders the message followed by the detail as ``key=value``
    pairs, the same shape the library's log lines use.
    """

    default_code: str = "kp_query_error"
    default_message: str = "query parameters could not be built"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        pairs = " ".join(f"{key}={value!r}" for key, value in self.detail.items())
        return f"{self.message} [{pairs}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain dict, e.g. to bind onto a structlog event."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
