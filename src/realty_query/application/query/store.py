"""Port: the document store the query layer reads from.

Implementations live in ``adapters/mongodb`` (motor) and ``adapters/memory``.
Every call is an independent read; none of them holds locks or state
between calls.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, TypeVar, runtime_checkable

from realty_query.application.pagination.page_request import Sort
from realty_query.application.query.projection import FieldMapping
from realty_query.kernel.ddd.specification import BaseSpecification

T = TypeVar("T")


@runtime_checkable
class DocumentStore(Protocol[T]):
    @property
    def name(self) -> str: ...

    @property
    def record_type(self) -> type[T]: ...

    async def count(self, spec: BaseSpecification[T]) -> int: ...

    async def find(
        self,
        spec: BaseSpecification[T],
        *,
        sort: Sequence[Sort] = (),
        skip: int = 0,
        limit: int | None = None,
        projection: FieldMapping[T, Any] | None = None,
    ) -> list[Any]:
        """Matching records, sorted and windowed, reshaped by *projection* when given."""
        ...

    async def find_one(self, spec: BaseSpecification[T]) -> T | None: ...

    async def sample(self, spec: BaseSpecification[T], size: int) -> list[T]: ...

    async def distinct(self, path: str, spec: BaseSpecification[T]) -> list[Any]: ...

    async def count_by(self, path: str, spec: BaseSpecification[T]) -> dict[Any, int]: ...

    async def count_elements(self, path: str, spec: BaseSpecification[T]) -> int:
        """Number of items in the *path* array across every record matching *spec*."""
        ...

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
        """One *destination* row per item of the *path* array, sorted and windowed.

        *fields* maps each destination field to a record path; paths under
        *path* read from the item, any other path from the owning record.
        Sort fields name destination fields.
        """
        ...


__all__ = ["DocumentStore"]
