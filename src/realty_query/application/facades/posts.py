"""Application facades – blog posts and their comments.

A post is published once its ``publish_date`` has passed.  Lists are
newest first unless the request names another sort field.
"""
from __future__ import annotations

import uuid
from collections.abc import Iterable
from typing import Any

from realty_query.application.facades.base import EntityQueries
from realty_query.application.pagination import PaginationRequest, PaginationResult, SortOrder
from realty_query.application.query.dynamic_filter import DynamicFilterResolver
from realty_query.application.query.pager import Pager
from realty_query.application.query.predicates import AnyEq, Eq, In, Lte, TextSearch
from realty_query.application.query.store import DocumentStore
from realty_query.kernel.ddd.specification import BaseSpecification, TrueSpecification
from realty_query.kernel.time import Clock, SystemClock
from realty_query.models.blog import CommentListItem, Post

PUBLISH_DATE = "publish_date"

COMMENT_FIELDS: dict[str, str] = {
    "post_id": "id",
    "post_title": "title",
    "id": "comments.id",
    "name": "comments.name",
    "email": "comments.email",
    "message": "comments.message",
    "date": "comments.date",
}


class PostsQueries(EntityQueries[Post]):
    resource = "post"

    def __init__(
        self,
        store: DocumentStore[Post],
        pager: Pager | None = None,
        filters: DynamicFilterResolver | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(store, pager, filters)
        self._clock = clock or SystemClock()

    def published(self, include_not_published: bool = False) -> BaseSpecification[Post]:
        if include_not_published:
            return TrueSpecification()
        return Lte(PUBLISH_DATE, self._clock.now())

    async def _page(
        self,
        spec: BaseSpecification[Post],
        request: PaginationRequest,
        include_not_published: bool,
        destination: type | None,
    ) -> PaginationResult[Any]:
        return await self._pager.paginate(
            self._store,
            self.published(include_not_published) & spec,
            request,
            destination=destination,
            default_sort=PUBLISH_DATE,
            default_order=SortOrder.DESC,
        )

    async def get_posts(
        self,
        request: PaginationRequest,
        include_not_published: bool = False,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        return await self._page(TrueSpecification(), request, include_not_published, destination)

    async def get_category_posts(
        self,
        request: PaginationRequest,
        category: str,
        include_not_published: bool = False,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        return await self._page(Eq("category", category), request, include_not_published, destination)

    async def get_posts_by_tag(
        self,
        request: PaginationRequest,
        tag: str,
        include_not_published: bool = False,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        return await self._page(AnyEq("tags", tag), request, include_not_published, destination)

    async def search_posts(
        self,
        request: PaginationRequest,
        query: str,
        include_not_published: bool = False,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        spec = TextSearch.for_record(Post, query)
        return await self._page(spec, request, include_not_published, destination)

    async def get_post(self, post_id: uuid.UUID) -> Post:
        return await self._get_or_raise(Eq("id", post_id), post_id)

    async def get_post_by_link(self, link: str) -> Post:
        return await self._get_or_raise(Eq("link", link), link)

    async def get_categories(self, include_not_published: bool = False) -> dict[Any, int]:
        """Number of posts per category."""
        return await self._store.count_by("category", self.published(include_not_published))

    async def get_tags(self, include_not_published: bool = False) -> list[str]:
        tags = await self._store.distinct("tags", self.published(include_not_published))
        return sorted(t for t in tags if t is not None)

    async def get_comments(self, request: PaginationRequest) -> PaginationResult[CommentListItem]:
        return await self._comment_page(TrueSpecification(), request)

    async def get_post_comments(
        self, post_id: uuid.UUID, request: PaginationRequest
    ) -> PaginationResult[CommentListItem]:
        return await self._comment_page(Eq("id", post_id), request)

    async def _comment_page(
        self, spec: BaseSpecification[Post], request: PaginationRequest
    ) -> PaginationResult[CommentListItem]:
        return await self._pager.paginate_elements(
            self._store,
            "comments",
            spec,
            request,
            destination=CommentListItem,
            fields=COMMENT_FIELDS,
        )

    async def is_link_used(self, link: str, exclude_ids: Iterable[uuid.UUID] = ()) -> bool:
        return await link_in_use(self._store, link, exclude_ids)


async def link_in_use(store: DocumentStore[Any], link: str, exclude_ids: Iterable[uuid.UUID] = ()) -> bool:
    """Whether a record other than *exclude_ids* already uses *link*."""
    spec: BaseSpecification[Any] = Eq("link", link)
    excluded = list(exclude_ids)
    if excluded:
        spec = spec & ~In("id", excluded)
    return await store.count(spec) > 0


__all__ = ["COMMENT_FIELDS", "PostsQueries", "link_in_use"]
