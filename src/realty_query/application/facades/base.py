"""Application facades – shared plumbing for per-entity query facades."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

from realty_query.application.facades.mappings import default_registry
from realty_query.application.query.dynamic_filter import DynamicFilterResolver
from realty_query.application.query.pager import Pager
from realty_query.application.query.projection import Projector
from realty_query.application.query.store import DocumentStore
from realty_query.kernel.ddd.specification import BaseSpecification
from realty_query.kernel.errors import NotFoundError
from realty_query.observability.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class EntityQueries(Generic[T]):
    """Read side of one collection: a store plus the pager and filter resolver."""

    resource: str = "record"

    def __init__(
        self,
        store: DocumentStore[T],
        pager: Pager | None = None,
        filters: DynamicFilterResolver | None = None,
    ) -> None:
        self._store = store
        self._pager = pager or Pager(Projector(default_registry()))
        self._filters = filters or DynamicFilterResolver()

    @property
    def store(self) -> DocumentStore[T]:
        return self._store

    async def _get_or_raise(self, spec: BaseSpecification[T], identifier: Any) -> T:
        record = await self._store.find_one(spec)
        if record is None:
            logger.info("query.not_found", resource=self.resource, identifier=str(identifier))
            raise NotFoundError(self.resource, identifier)
        return record


__all__ = ["EntityQueries"]
