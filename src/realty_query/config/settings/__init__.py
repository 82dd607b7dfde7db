"""Config settings – environment-driven configuration."""
from realty_query.config.settings.app import DatabaseSettings, QuerySettings
from realty_query.config.settings.base import Settings
from realty_query.config.settings.factory import SettingsFactory
from realty_query.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DatabaseSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "QuerySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
