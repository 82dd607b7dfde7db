"""Application pagination – PaginationRequest, Sort, SortOrder."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, ClassVar


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class Sort:
    """Single resolved sort criterion over a record path."""

    field: str
    order: SortOrder = SortOrder.ASC

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESC


@dataclasses.dataclass(frozen=True)
class PaginationRequest:
    """Offset-based pagination window with an optional sort override.

    ``sort_field`` names a record field (loosely cased, dotted for nested
    fields).  When present it replaces the caller's default sort field and
    order, and ``sort_order`` applies.
    """

    MAX_LIMIT: ClassVar[int] = 1000

    offset: int = 0
    limit: int = 20
    sort_field: str | None = None
    sort_order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.limit < 0 or self.limit > self.MAX_LIMIT:
            raise ValueError(f"limit must be between 0 and {self.MAX_LIMIT}")

    @classmethod
    def for_page(cls, page: int, size: int = 20, **kwargs: Any) -> "PaginationRequest":
        """Build a request from a 1-based page number."""
        if page < 1:
            raise ValueError("page must be >= 1")
        return cls(offset=(page - 1) * size, limit=size, **kwargs)


__all__ = ["PaginationRequest", "Sort", "SortOrder"]
