"""Application facades – listing reads and searches."""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Mapping

from realty_query.application.facades.base import EntityQueries
from realty_query.application.pagination import PaginationRequest, PaginationResult, Sort, SortOrder
from realty_query.application.query.dynamic_filter import DynamicFilterResolver
from realty_query.application.query.pager import Pager
from realty_query.application.query.predicates import Eq, In, IsNull, NotEmpty, NotNull
from realty_query.application.query.store import DocumentStore
from realty_query.application.search.builder import ListingPredicateBuilder, free_text_spec
from realty_query.application.search.query import ListingSearchRequest
from realty_query.application.search.result import (
    ListingCoordinates,
    ListingSearchResult,
    ListingSearchSuggestion,
)
from realty_query.application.search.similarity import similar_listings_spec
from realty_query.config.settings.app import QuerySettings
from realty_query.models.enums import ListingSource
from realty_query.models.listing import Listing


class ListingsQueries(EntityQueries[Listing]):
    resource = "listing"

    def __init__(
        self,
        store: DocumentStore[Listing],
        pager: Pager | None = None,
        filters: DynamicFilterResolver | None = None,
        builder: ListingPredicateBuilder | None = None,
        settings: QuerySettings | None = None,
    ) -> None:
        super().__init__(store, pager, filters)
        self._builder = builder or ListingPredicateBuilder()
        self._settings = settings or QuerySettings()

    async def search(self, search: ListingSearchRequest) -> ListingSearchResult:
        """Page of matching listings plus a map marker for every match.

        An explicit ``search.pagination.sort_field`` wins over ``search.sort_by``.
        """
        spec = self._builder.build(search)
        sort_field, sort_order = search.sort_by.sort
        page = await self._pager.paginate(
            self._store,
            spec,
            search.pagination,
            default_sort=sort_field,
            default_order=sort_order,
        )
        markers = self._pager.projector.compile(Listing, ListingCoordinates)
        coordinates = await self._store.find(spec & NotNull("address.coordinates"), projection=markers)
        return ListingSearchResult(search=search, result=page, coordinates=coordinates)

    async def get_listing(self, listing_id: uuid.UUID) -> Listing:
        return await self._get_or_raise(Eq("id", listing_id), listing_id)

    async def get_listings(
        self,
        request: PaginationRequest,
        filter_map: Mapping[str, str | None] | None = None,
        destination: type | None = None,
    ) -> PaginationResult[Any]:
        spec = self._filters.resolve(filter_map, Listing)
        return await self._pager.paginate(self._store, spec, request, destination=destination)

    async def get_similar_listings(
        self,
        listing_id: uuid.UUID,
        max_price_delta: float | None = None,
        max_distance_km: float | None = None,
        limit: int = 10,
    ) -> list[Listing]:
        reference = await self.get_listing(listing_id)
        delta = self._settings.similar_max_price_delta if max_price_delta is None else max_price_delta
        spec = similar_listings_spec(reference, delta, max_distance_km)
        return await self._store.find(spec, limit=limit)

    async def get_search_suggestions(self, query: str | None, limit: int | None = None) -> list[ListingSearchSuggestion]:
        text = (query or "").strip().lower()
        mapping = self._pager.projector.compile(Listing, ListingSearchSuggestion)
        return await self._store.find(
            free_text_spec(text),
            limit=self._settings.suggestions_limit if limit is None else limit,
            projection=mapping,
        )

    async def get_featured_listings(
        self, limit: int | None = None, take_random_if_not_enough: bool = False
    ) -> list[Listing]:
        """Random featured listings, topped up with random listings that have photos."""
        size = self._settings.featured_limit if limit is None else limit
        featured = await self._store.sample(Eq("featured", True), size)
        if len(featured) >= size or not take_random_if_not_enough:
            return featured

        taken = [listing.id for listing in featured]
        extra = await self._store.sample(~In("id", taken) & NotEmpty("photos"), size - len(featured))
        return featured + extra

    async def get_listings_with_empty_coordinates(self) -> list[Listing]:
        return await self._store.find(NotNull("address") & IsNull("address.coordinates"))

    async def get_external_ids(self, source: ListingSource) -> list[str]:
        ids = await self._store.distinct("external_id", Eq("source", source))
        return [i for i in ids if i is not None]

    async def get_latest_update(self, source: ListingSource) -> datetime | None:
        latest = await self._store.find(
            Eq("source", source), sort=(Sort("last_updated", SortOrder.DESC),), limit=1
        )
        return latest[0].last_updated if latest else None


__all__ = ["ListingsQueries"]
