"""Config validation errors.

Every configuration error names the offending setting. ``detail`` carries
the dataclass field (``setting``), the environment variable it is read
from (``env_var``) and, for invalid values, the rejected ``value``.
"""
from __future__ import annotations

from typing import Any

from kp_query.kernel.errors import BaseError


class ConfigError(BaseError):
    """Query defaults could not be loaded or are inconsistent."""

    default_code = "config_error"
    default_message = "query settings could not be loaded"

    def __init__(
        self,
        message: str | None = None,
        *,
        setting: str | None = None,
        env_var: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if setting is not None:
            detail["setting"] = setting
        if env_var is not None:
            detail["env_var"] = env_var
        super().__init__(message, detail=detail, **kwargs)
        self.setting_name = setting
        self.env_var = env_var


class MissingRequiredSettingError(ConfigError):
    """A setting without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, setting: str, env_var: str | None = None) -> None:
        super().__init__(
            f"Required setting '{setting}' is missing (set {env_var or setting})",
            setting=setting,
            env_var=env_var,
        )


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used to build queries."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting: str,
        value: object,
        reason: str,
        *,
        env_var: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"Setting '{setting}' has invalid value {value!r}: {reason}",
            setting=setting,
            env_var=env_var,
            detail={"value": value, "reason": reason},
            cause=cause,
        )
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
