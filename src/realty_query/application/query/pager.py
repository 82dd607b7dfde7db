"""Pager – count, sort, window and project one page of a query.

The count and the page fetch are two separate reads.  Under concurrent
writes they may see different snapshots, so ``total_records`` can disagree
with what a neighbouring page returns; callers treat this as an accepted
relaxation, not an error.
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from realty_query.application.pagination import PaginationRequest, PaginationResult, SortOrder
from realty_query.application.query.projection import Projector
from realty_query.application.query.sorting import SortResolver
from realty_query.application.query.store import DocumentStore
from realty_query.kernel.ddd.specification import BaseSpecification
from realty_query.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Pager:
    def __init__(
        self,
        projector: Projector | None = None,
        sorts: SortResolver | None = None,
    ) -> None:
        self._projector = projector or Projector()
        self._sorts = sorts or SortResolver()

    @property
    def projector(self) -> Projector:
        return self._projector

    async def paginate(
        self,
        store: DocumentStore[T],
        spec: BaseSpecification[T],
        request: PaginationRequest,
        *,
        destination: type | None = None,
        default_sort: str | None = None,
        default_order: SortOrder = SortOrder.ASC,
    ) -> PaginationResult[Any]:
        """Return the page of *store* records matching *spec* described by *request*.

        Sort and projection are resolved before the first round trip.
        Without any sort the order is whatever the store yields and is
        unspecified.
        """
        sort = self._sorts.resolve_sort(request, store.record_type, default_sort, default_order)
        mapping = self._projector.compile(store.record_type, destination)

        total = await store.count(spec)
        if request.limit == 0 or request.offset >= total:
            results: list[Any] = []
        else:
            results = await store.find(
                spec,
                sort=(sort,) if sort else (),
                skip=request.offset,
                limit=request.limit,
                projection=mapping,
            )

        logger.debug(
            "query.paginate",
            collection=store.name,
            total=total,
            offset=request.offset,
            limit=request.limit,
            returned=len(results),
            sort=sort.field if sort else None,
        )
        return PaginationResult(
            results=results,
            total_records=total,
            offset=request.offset,
            limit=request.limit,
        )

    async def paginate_elements(
        self,
        store: DocumentStore[T],
        path: str,
        spec: BaseSpecification[T],
        request: PaginationRequest,
        *,
        destination: type,
        fields: Mapping[str, str],
        default_sort: str | None = None,
        default_order: SortOrder = SortOrder.ASC,
    ) -> PaginationResult[Any]:
        """Page through the items of the *path* array of every record matching *spec*.

        Each item becomes one *destination* row built from *fields*; sort
        names resolve against *destination*.
        """
        sort = self._sorts.resolve_sort(request, destination, default_sort, default_order)

        total = await store.count_elements(path, spec)
        if request.limit == 0 or request.offset >= total:
            results: list[Any] = []
        else:
            results = await store.find_elements(
                path,
                spec,
                fields,
                destination,
                sort=(sort,) if sort else (),
                skip=request.offset,
                limit=request.limit,
            )

        logger.debug(
            "query.paginate_elements",
            collection=store.name,
            path=path,
            total=total,
            offset=request.offset,
            limit=request.limit,
            returned=len(results),
            sort=sort.field if sort else None,
        )
        return PaginationResult(
            results=results,
            total_records=total,
            offset=request.offset,
            limit=request.limit,
        )


__all__ = ["Pager"]
