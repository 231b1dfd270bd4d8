"""Config settings – QuerySettings for the filter builders."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from kp_query.config.validation import InvalidSettingValueError
from kp_query.kernel.types import RatingSource

API_MAX_LIMIT = 250


@dataclasses.dataclass
class QuerySettings:
    """Defaults applied when building query parameters.

    Read from ``KP_*`` environment variables by
    :class:`~kp_query.config.settings.EnvSettingsLoader`; values are
    checked on construction, whichever way the instance was built.
    """

    env_prefix: ClassVar[str] = "KP"

    default_rating_source: str = RatingSource.KP.value
    default_limit: int = 10
    max_limit: int = API_MAX_LIMIT
    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_var(cls, setting: str) -> str:
        """``env_var("default_limit")`` → ``"KP_DEFAULT_LIMIT"``."""
        return f"{cls.env_prefix}_{setting}".upper()

    def _validate(self) -> None:
        if not 1 <= self.max_limit <= API_MAX_LIMIT:
            self._reject("max_limit", f"must be between 1 and {API_MAX_LIMIT}")
        if not 1 <= self.default_limit <= self.max_limit:
            self._reject("default_limit", f"must be between 1 and {self.max_limit}")
        if self.default_rating_source not in RatingSource.values():
            self._reject("default_rating_source", f"must be one of {sorted(RatingSource.values())}")

    def _reject(self, setting: str, reason: str) -> None:
        raise InvalidSettingValueError(
            setting, getattr(self, setting), reason, env_var=self.env_var(setting)
        )


__all__ = ["API_MAX_LIMIT", "QuerySettings"]
