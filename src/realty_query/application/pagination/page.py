"""Application pagination – PaginationResult envelope."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

from realty_query.application.pagination.page_request import PaginationRequest

T = TypeVar("T")


@dataclasses.dataclass
class PaginationResult(Generic[T]):
    """One page of results plus the size of the whole filtered set.

    ``total_records`` counts every matching record regardless of the window.
    """

    results: list[T]
    total_records: int
    offset: int
    limit: int

    @property
    def page(self) -> int:
        if self.limit <= 0:
            return 1
        return self.offset // self.limit + 1

    @property
    def total_pages(self) -> int:
        if self.limit <= 0 or self.total_records <= 0:
            return 0
        return math.ceil(self.total_records / self.limit)

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.results) < self.total_records

    def map(self, fn: Callable[[T], Any]) -> "PaginationResult[Any]":
        """Return a new envelope with each result transformed by *fn*."""
        return PaginationResult(
            results=[fn(item) for item in self.results],
            total_records=self.total_records,
            offset=self.offset,
            limit=self.limit,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], request: PaginationRequest) -> "PaginationResult[T]":
        """Build an envelope by slicing already materialised *all_items*."""
        start = request.offset
        end = start + request.limit
        return cls(
            results=list(all_items[start:end]),
            total_records=len(all_items),
            offset=request.offset,
            limit=request.limit,
        )


__all__ = ["PaginationResult"]
