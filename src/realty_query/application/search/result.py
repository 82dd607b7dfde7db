"""Application search – result shapes returned by listing searches."""
from __future__ import annotations

import dataclasses
import uuid

from realty_query.application.pagination import PaginationResult
from realty_query.application.search.query import ListingSearchRequest
from realty_query.models.enums import PropertyType, TransactionType
from realty_query.models.listing import Address, Listing


@dataclasses.dataclass(kw_only=True)
class ListingCoordinates:
    """Map marker for one matching listing."""

    listing_id: uuid.UUID
    latitude: float
    longitude: float
    type: PropertyType | None = None

    def __post_init__(self) -> None:
        if self.type is None:
            self.type = PropertyType.OTHER


@dataclasses.dataclass(kw_only=True)
class ListingSearchSuggestion:
    listing_id: uuid.UUID
    mls_number: str | None = None
    transaction_type: TransactionType | None = None
    address: Address | None = None

    def __post_init__(self) -> None:
        if self.transaction_type is None:
            self.transaction_type = TransactionType.FOR_SALE


@dataclasses.dataclass(kw_only=True)
class ListingSearchResult:
    search: ListingSearchRequest
    result: PaginationResult[Listing]
    coordinates: list[ListingCoordinates] = dataclasses.field(default_factory=list)


__all__ = ["ListingCoordinates", "ListingSearchResult", "ListingSearchSuggestion"]
