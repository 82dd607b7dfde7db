"""Config – settings dataclasses, loaders and errors."""

from realty_query.config.settings import (
    DatabaseSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    QuerySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from realty_query.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DatabaseSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "QuerySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
