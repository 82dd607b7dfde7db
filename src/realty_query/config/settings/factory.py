"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from realty_query.config.settings.base import Settings
from realty_query.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from realty_query.config.validation.errors import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Merge the values of several loaders, apply overrides, and build the settings.

    Loaders are applied in order; later loaders win for overlapping fields and
    *overrides* win over all of them.  Without loaders the process
    environment is read.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without default is absent from every source.
        InvalidSettingValueError
            A raw value cannot be coerced to the field type.
        ConfigError
            The settings class rejected the merged values.
        """
        merged: dict[str, Any] = {}
        for loader in loaders if loaders is not None else [EnvSettingsLoader()]:
            merged.update(loader.read(settings_cls))
        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):
            if field.name in merged:
                continue
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(settings_cls.env_key(field.name))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
