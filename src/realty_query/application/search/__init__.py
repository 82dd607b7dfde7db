"""Application search – listing search requests, predicate building and results."""
from realty_query.application.search.builder import (
    ListingPredicateBuilder,
    boundary_spec,
    build_listing_spec,
    free_text_spec,
    price_range_spec,
    room_count_spec,
)
from realty_query.application.search.query import (
    ListingSearchRequest,
    ListingsSortBy,
    RoomNumberSearch,
    TransactionTypeSearch,
)
from realty_query.application.search.result import (
    ListingCoordinates,
    ListingSearchResult,
    ListingSearchSuggestion,
)
from realty_query.application.search.similarity import price_band, similar_listings_spec

__all__ = [
    "ListingCoordinates",
    "ListingPredicateBuilder",
    "ListingSearchRequest",
    "ListingSearchResult",
    "ListingSearchSuggestion",
    "ListingsSortBy",
    "RoomNumberSearch",
    "TransactionTypeSearch",
    "boundary_spec",
    "build_listing_spec",
    "free_text_spec",
    "price_band",
    "price_range_spec",
    "room_count_spec",
    "similar_listings_spec",
]
