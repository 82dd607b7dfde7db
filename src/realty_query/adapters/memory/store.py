"""In-process document store.

Holds records in a list and evaluates predicates with
``is_satisfied_by``, so it answers every query the Mongo adapter answers.
Used by tests and by local tooling that has no database.
"""
from __future__ import annotations

import random
from collections import Counter
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from realty_query.application.pagination.page_request import Sort
from realty_query.application.query.predicates import resolve_path
from realty_query.application.query.projection import FieldMapping
from realty_query.application.query.sorting import sort_records
from realty_query.kernel.ddd.specification import BaseSpecification

T = TypeVar("T")


def _hashable(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


class InMemoryDocumentStore(Generic[T]):
    def __init__(
        self,
        record_type: type[T],
        records: Iterable[T] = (),
        name: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._record_type = record_type
        self._records: list[T] = list(records)
        self._name = name or record_type.__name__.lower()
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    def add(self, *records: T) -> None:
        self._records.extend(records)

    def clear(self) -> None:
        self._records.clear()

    def _matching(self, spec: BaseSpecification[T]) -> list[T]:
        return [r for r in self._records if spec.is_satisfied_by(r)]

    async def count(self, spec: BaseSpecification[T]) -> int:
        return len(self._matching(spec))

    async def find(
        self,
        spec: BaseSpecification[T],
        *,
        sort: Sequence[Sort] = (),
        skip: int = 0,
        limit: int | None = None,
        projection: FieldMapping[T, Any] | None = None,
    ) -> list[Any]:
        records = self._matching(spec)
        if sort:
            records = sort_records(records, sort)
        window = records[skip:] if limit is None else records[skip : skip + limit]
        return projection.apply_all(window) if projection is not None else window

    async def find_one(self, spec: BaseSpecification[T]) -> T | None:
        return next((r for r in self._records if spec.is_satisfied_by(r)), None)

    async def sample(self, spec: BaseSpecification[T], size: int) -> list[T]:
        records = self._matching(spec)
        return self._rng.sample(records, min(size, len(records)))

    async def distinct(self, path: str, spec: BaseSpecification[T]) -> list[Any]:
        seen: dict[Any, Any] = {}
        for record in self._matching(spec):
            value = resolve_path(record, path)
            for item in value if isinstance(value, list) else [value]:
                seen.setdefault(_hashable(item), item)
        return list(seen.values())

    async def count_by(self, path: str, spec: BaseSpecification[T]) -> dict[Any, int]:
        return dict(Counter(_hashable(resolve_path(r, path)) for r in self._matching(spec)))

    def _elements(self, path: str, spec: BaseSpecification[T]) -> list[tuple[T, Any]]:
        pairs: list[tuple[T, Any]] = []
        for record in self._matching(spec):
            items = resolve_path(record, path)
            if isinstance(items, list):
                pairs.extend((record, item) for item in items if item is not None)
        return pairs

    async def count_elements(self, path: str, spec: BaseSpecification[T]) -> int:
        return len(self._elements(path, spec))

    async def find_elements(
        self,
        path: str,
        spec: BaseSpecification[T],
        fields: Mapping[str, str],
        destination: type,
        *,
        sort: Sequence[Sort] = (),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Any]:
        prefix = path + "."
        rows = []
        for record, item in self._elements(path, spec):
            values = {}
            for dest, source in fields.items():
                if source == path:
                    values[dest] = item
                elif source.startswith(prefix):
                    values[dest] = resolve_path(item, source[len(prefix) :])
                else:
                    values[dest] = resolve_path(record, source)
            rows.append(destination(**values))
        if sort:
            rows = sort_records(rows, sort)
        return rows[skip:] if limit is None else rows[skip : skip + limit]


__all__ = ["InMemoryDocumentStore"]
