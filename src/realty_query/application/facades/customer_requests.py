"""Application facades – customer requests."""
from __future__ import annotations

import uuid
from typing import Any

from realty_query.application.facades.base import EntityQueries
from realty_query.application.pagination import PaginationRequest, PaginationResult, SortOrder
from realty_query.application.query.predicates import Eq
from realty_query.kernel.ddd.specification import TrueSpecification
from realty_query.models.customer_request import CustomerRequest


class CustomerRequestsQueries(EntityQueries[CustomerRequest]):
    resource = "customer_request"

    async def get_customer_requests(
        self, request: PaginationRequest, destination: type | None = None
    ) -> PaginationResult[Any]:
        return await self._pager.paginate(
            self._store,
            TrueSpecification(),
            request,
            destination=destination,
            default_sort="date_time_utc",
            default_order=SortOrder.DESC,
        )

    async def get_customer_request(self, request_id: uuid.UUID) -> CustomerRequest:
        return await self._get_or_raise(Eq("id", request_id), request_id)

    async def get_unread_count(self) -> int:
        return await self._store.count(Eq("read", False))


__all__ = ["CustomerRequestsQueries"]
