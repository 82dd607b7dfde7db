"""Site settings stored as one document per settings type.

Known types decode into their own shape; any other type falls back to
``GenericSettings`` holding the raw value.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Final, Union


@dataclasses.dataclass(kw_only=True)
class Setting:
    """Raw stored form: ``id`` is the settings type, ``value`` the payload."""

    id: str
    value: Any = None


@dataclasses.dataclass(kw_only=True)
class WebsiteSettings:
    website_name: str | None = None
    website_address: str | None = None
    main_color: str | None = None
    logo: str | None = None
    favicon: str | None = None


@dataclasses.dataclass(kw_only=True)
class ListingsSettings:
    default_page_size: int = 20
    show_sold_listings: bool = False
    disclaimer: str | None = None


@dataclasses.dataclass(kw_only=True)
class GenericSettings:
    type: str
    value: Any = None


SettingsValue = Union[WebsiteSettings, ListingsSettings, GenericSettings]

KNOWN_SETTINGS: Final[dict[str, type]] = {
    "website": WebsiteSettings,
    "listings": ListingsSettings,
}

__all__ = [
    "KNOWN_SETTINGS",
    "GenericSettings",
    "ListingsSettings",
    "Setting",
    "SettingsValue",
    "WebsiteSettings",
]
