"""Config – settings, loaders and configuration errors."""

from kp_query.config.settings import DotenvSettingsLoader, EnvSettingsLoader, QuerySettings, SettingsLoader
from kp_query.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "SettingsLoader",
]
