"""Application facades – the projections the facades offer out of the box."""
from __future__ import annotations

from realty_query.application.query.projection import MappingRegistry
from realty_query.application.search.result import ListingCoordinates, ListingSearchSuggestion
from realty_query.models import (
    CustomerRequest,
    CustomerRequestListItem,
    Listing,
    ListingListItem,
    Page,
    PageListItem,
    Post,
    PostListItem,
)


def register_defaults(registry: MappingRegistry) -> MappingRegistry:
    registry.register(Listing, ListingListItem, bedrooms="building.bedrooms_total")
    registry.register(
        Listing,
        ListingCoordinates,
        listing_id="id",
        type="property_type",
        latitude="address.coordinates.latitude",
        longitude="address.coordinates.longitude",
    )
    registry.register(Listing, ListingSearchSuggestion, listing_id="id")
    registry.register(Post, PostListItem, comments_count=lambda post: len(post.comments or ()))
    registry.register(Page, PageListItem)
    registry.register(CustomerRequest, CustomerRequestListItem)
    return registry


def default_registry() -> MappingRegistry:
    return register_defaults(MappingRegistry())


__all__ = ["default_registry", "register_defaults"]
