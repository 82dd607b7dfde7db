"""Application search – the typed listing search request."""
from __future__ import annotations

import dataclasses
from enum import IntEnum

from realty_query.application.pagination import PaginationRequest, SortOrder
from realty_query.kernel.types import CoordinateBoundary
from realty_query.models.enums import (
    BuildingType,
    ConstructionStyleAttachment,
    OwnershipType,
    PropertyType,
)


class RoomNumberSearch(IntEnum):
    """Room count class: ``ZERO``..``FIVE`` mean exactly N, ``*_PLUS`` mean N or more."""

    ANY = -1
    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    ONE_PLUS = 6
    TWO_PLUS = 7
    THREE_PLUS = 8
    FOUR_PLUS = 9
    FIVE_PLUS = 10

    @property
    def is_exact(self) -> bool:
        return self < RoomNumberSearch.ONE_PLUS

    @property
    def minimum(self) -> int:
        """The count this class requires (exactly, or as a floor)."""
        if self is RoomNumberSearch.ANY:
            raise ValueError("ANY has no minimum")
        if self.is_exact:
            return int(self)
        return int(self) - int(RoomNumberSearch.ONE_PLUS) + 1


class TransactionTypeSearch(IntEnum):
    FOR_SALE = 0
    FOR_RENT = 1


class ListingsSortBy(IntEnum):
    UNSPECIFIED = 0
    PRICE_ASC = 1
    PRICE_DESC = 2
    DATE_NEWEST = 3
    DATE_OLDEST = 4

    @property
    def sort(self) -> tuple[str | None, SortOrder]:
        """``(field, order)`` this choice sorts by; no field for ``UNSPECIFIED``."""
        return _SORTS[self]


_SORTS: dict[ListingsSortBy, tuple[str | None, SortOrder]] = {
    ListingsSortBy.UNSPECIFIED: (None, SortOrder.ASC),
    ListingsSortBy.PRICE_ASC: ("price", SortOrder.ASC),
    ListingsSortBy.PRICE_DESC: ("price", SortOrder.DESC),
    ListingsSortBy.DATE_NEWEST: ("last_updated", SortOrder.DESC),
    ListingsSortBy.DATE_OLDEST: ("last_updated", SortOrder.ASC),
}


@dataclasses.dataclass(frozen=True, kw_only=True)
class ListingSearchRequest:
    """Every dimension is optional; the ones that are set are ANDed together."""

    transaction_type: TransactionTypeSearch | None = None
    property_type: PropertyType | None = None
    ownership_type: OwnershipType | None = None
    building_type: BuildingType | None = None
    construction_style: ConstructionStyleAttachment | None = None
    neighbourhood: str | None = None
    community_name: str | None = None
    subdivision: str | None = None
    city: str | None = None
    postal_code: str | None = None
    boundaries: CoordinateBoundary | None = None
    min_price: float | None = None
    max_price: float | None = None
    min_area_sq_ft: float | None = None
    garage: bool = False
    waterfront: bool = False
    bedrooms: RoomNumberSearch = RoomNumberSearch.ANY
    bathrooms: RoomNumberSearch = RoomNumberSearch.ANY
    query: str | None = None
    sort_by: ListingsSortBy = ListingsSortBy.UNSPECIFIED
    pagination: PaginationRequest = dataclasses.field(default_factory=PaginationRequest)


__all__ = [
    "ListingSearchRequest",
    "ListingsSortBy",
    "RoomNumberSearch",
    "TransactionTypeSearch",
]
