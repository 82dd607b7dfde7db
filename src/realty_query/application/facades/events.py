"""Application facades – the event log."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from realty_query.application.facades.base import EntityQueries
from realty_query.application.pagination import PaginationRequest, PaginationResult, Sort, SortOrder
from realty_query.application.query.predicates import Gte
from realty_query.models.event import Event


class EventsQueries(EntityQueries[Event]):
    resource = "event"

    async def get_events(
        self,
        request: PaginationRequest,
        filter_map: Mapping[str, str | None] | None = None,
    ) -> PaginationResult[Any]:
        """Events matching the dynamic *filter_map*, newest first by default."""
        spec = self._filters.resolve(filter_map, Event)
        return await self._pager.paginate(
            self._store, spec, request, default_sort="created_at", default_order=SortOrder.DESC
        )

    async def get_events_since(self, start: datetime) -> list[Event]:
        return await self._store.find(Gte("created_at", start), sort=(Sort("created_at"),))


__all__ = ["EventsQueries"]
