"""Content page records."""

from __future__ import annotations

import dataclasses
import uuid
from typing import Any


@dataclasses.dataclass(kw_only=True)
class Page:
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    title: str
    link: str
    unpublished: bool = False
    keywords: str | None = None
    description: str | None = None
    components: list[dict[str, Any]] = dataclasses.field(default_factory=list)
    additional_css: str | None = None
    configuration: dict[str, Any] | None = None
    views: int = 0


@dataclasses.dataclass(kw_only=True)
class PageListItem:
    id: uuid.UUID
    title: str
    link: str
    unpublished: bool = False
    views: int = 0


__all__ = ["Page", "PageListItem"]
