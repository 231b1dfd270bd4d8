"""Config settings – environment-based configuration."""
from kp_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from kp_query.config.settings.query import API_MAX_LIMIT, QuerySettings

__all__ = [
    "API_MAX_LIMIT",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "QuerySettings",
    "SettingsLoader",
]
