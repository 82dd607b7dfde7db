"""Application facades – site settings as a tagged union.

Known settings types decode into their own dataclass; anything else comes
back as :class:`GenericSettings` carrying the raw stored value.
"""
from __future__ import annotations

from typing import Any, TypeVar

import pydantic

from realty_query.application.facades.base import EntityQueries
from realty_query.application.query.predicates import Eq
from realty_query.kernel.errors import ValidationError
from realty_query.models.settings import KNOWN_SETTINGS, GenericSettings, Setting, SettingsValue

S = TypeVar("S")


def decode_setting(settings_type: str, value: Any, shape: type[S] | None = None) -> Any:
    shape = shape or KNOWN_SETTINGS.get(settings_type)  # type: ignore[assignment]
    if shape is None:
        return GenericSettings(type=settings_type, value=value)
    try:
        return pydantic.TypeAdapter(shape).validate_python(value or {})
    except pydantic.ValidationError as exc:
        raise ValidationError(
            f"Stored '{settings_type}' settings do not match {shape.__name__}",
            errors=[{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        ) from exc


class SettingsQueries(EntityQueries[Setting]):
    resource = "setting"

    async def get_setting(self, settings_type: str) -> SettingsValue | None:
        setting = await self._store.find_one(Eq("id", settings_type))
        if setting is None:
            return None
        return decode_setting(settings_type, setting.value)

    async def get_setting_as(self, settings_type: str, shape: type[S]) -> S | None:
        """Decode the stored value into an explicit *shape*."""
        setting = await self._store.find_one(Eq("id", settings_type))
        if setting is None:
            return None
        return decode_setting(settings_type, setting.value, shape)


__all__ = ["SettingsQueries", "decode_setting"]
