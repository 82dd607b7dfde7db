"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

Loaders return only the values their source actually holds; defaults and
required-field checks are the job of :class:`SettingsFactory`.
"""
from __future__ import annotations

import abc
import dataclasses
import os
import types
import typing
from collections.abc import Mapping
from typing import Any

from dotenv import dotenv_values

from realty_query.config.settings.base import Settings
from realty_query.config.validation import InvalidSettingValueError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class SettingsLoader(abc.ABC):
    """Port: read raw setting values for a settings class from some source."""

    @abc.abstractmethod
    def read(self, settings_class: type[Settings]) -> dict[str, Any]: ...


def _coerce(key: str, raw: str, type_hint: Any) -> Any:  # noqa: PLR0911
    base = type_hint
    if typing.get_origin(type_hint) in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(type_hint) if a is not type(None)]
        base = args[0] if len(args) == 1 else str
    try:
        if base is bool:
            lowered = raw.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError("expected a boolean")
        if base is int:
            return int(raw)
        if base is float:
            return float(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(key, raw, str(exc)) from exc
    if typing.get_origin(base) in (list, tuple):
        return [v.strip() for v in raw.split(",") if v.strip()]
    return raw


def _read_mapping(source: Mapping[str, str | None], settings_class: type[Settings]) -> dict[str, Any]:
    hints = typing.get_type_hints(settings_class)
    values: dict[str, Any] = {}
    for field in dataclasses.fields(settings_class):
        key = settings_class.env_key(field.name)
        raw = source.get(key)
        if raw is None:
            continue
        values[field.name] = _coerce(key, raw, hints.get(field.name, str))
    return values


class EnvSettingsLoader(SettingsLoader):
    """Read settings from OS environment variables (or an explicit mapping)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        return _read_mapping(os.environ if self._environ is None else self._environ, settings_class)


class DotenvSettingsLoader(SettingsLoader):
    """Read settings from a ``.env`` file without touching ``os.environ``."""

    def __init__(self, env_file: str = ".env") -> None:
        self._env_file = env_file

    def read(self, settings_class: type[Settings]) -> dict[str, Any]:
        if not os.path.exists(self._env_file):
            return {}
        return _read_mapping(dotenv_values(self._env_file), settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
