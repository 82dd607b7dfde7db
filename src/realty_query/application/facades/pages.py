"""Application facades – content pages."""
from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import Any

from realty_query.application.facades.base import EntityQueries
from realty_query.application.facades.posts import link_in_use
from realty_query.application.pagination import PaginationRequest, PaginationResult
from realty_query.application.query.predicates import Eq
from realty_query.kernel.ddd.specification import BaseSpecification, TrueSpecification
from realty_query.models.page import Page


class PagesQueries(EntityQueries[Page]):
    resource = "page"

    @staticmethod
    def published(include_not_published: bool = False) -> BaseSpecification[Page]:
        if include_not_published:
            return TrueSpecification()
        return Eq("unpublished", False)

    async def get_pages(
        self,
        request: PaginationRequest,
        include_not_published: bool = False,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        return await self._pager.paginate(
            self._store, self.published(include_not_published), request, destination=destination
        )

    async def get_page(self, page_id: uuid.UUID) -> Page:
        return await self._get_or_raise(Eq("id", page_id), page_id)

    async def get_page_by_link(self, link: str) -> Page:
        return await self._get_or_raise(Eq("link", link), link)

    async def is_link_used(self, link: str, exclude_ids: Iterable[uuid.UUID] = ()) -> bool:
        return await link_in_use(self._store, link, exclude_ids)


__all__ = ["PagesQueries"]
