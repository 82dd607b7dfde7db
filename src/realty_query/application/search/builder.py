"""Application search – ListingPredicateBuilder.

Turns a :class:`ListingSearchRequest` into one predicate over
:class:`~realty_query.models.Listing`.  Every populated dimension adds one
clause and all clauses are ANDed, so clause order never changes the
result.  It follows index-friendliness: cheap, selective equality first.

Any clause that compares a field which may be null carries its own
``NotNull`` guard, so a record missing that field is excluded rather than
slipping through a comparison.
"""
from __future__ import annotations

from realty_query.application.query.predicates import (
    AnyEq,
    ElemMatch,
    Eq,
    Gte,
    In,
    Lte,
    NotNull,
    StartsWith,
    TextSearch,
)
from realty_query.application.search.query import (
    ListingSearchRequest,
    RoomNumberSearch,
    TransactionTypeSearch,
)
from realty_query.kernel.ddd.specification import BaseSpecification, TrueSpecification, all_of
from realty_query.kernel.types import CoordinateBoundary
from realty_query.models.constants import GARAGE_TYPES, RENT_TYPES, SALE_TYPES
from realty_query.models.listing import Listing

ListingSpec = BaseSpecification[Listing]


def room_count_spec(path: str, rooms: RoomNumberSearch) -> ListingSpec:
    if rooms is RoomNumberSearch.ANY:
        return TrueSpecification()
    compare = Eq(path, rooms.minimum) if rooms.is_exact else Gte(path, rooms.minimum)
    return NotNull(path) & compare


def boundary_spec(boundary: CoordinateBoundary, path: str = "address.coordinates") -> ListingSpec:
    """Inclusive four-sided range check on *path*'s latitude and longitude."""
    sw, ne = boundary.south_west, boundary.north_east
    return all_of(
        [
            NotNull(path),
            Gte(f"{path}.latitude", sw.latitude),
            Lte(f"{path}.latitude", ne.latitude),
            Gte(f"{path}.longitude", sw.longitude),
            Lte(f"{path}.longitude", ne.longitude),
        ]
    )


def price_range_spec(min_price: float | None, max_price: float | None) -> ListingSpec:
    clauses: list[ListingSpec] = []
    if min_price is not None:
        clauses.append(Gte("price", min_price))
    if max_price is not None:
        clauses.append(Lte("price", max_price))
    if clauses:
        clauses.insert(0, NotNull("price"))
    return all_of(clauses)


def free_text_spec(query: str) -> ListingSpec:
    """MLS number prefix OR full-text match; the one place a dimension ORs internally."""
    text = query.strip()
    return StartsWith("mls_number", text, ignore_case=True) | TextSearch.for_record(Listing, text)


class ListingPredicateBuilder:
    def build(self, search: ListingSearchRequest) -> ListingSpec:
        clauses: list[ListingSpec] = []

        if search.transaction_type is not None:
            types = SALE_TYPES if search.transaction_type is TransactionTypeSearch.FOR_SALE else RENT_TYPES
            clauses += [NotNull("transaction_type"), In("transaction_type", types)]
        if search.property_type is not None:
            clauses.append(Eq("property_type", search.property_type))
        if search.ownership_type is not None:
            clauses.append(Eq("ownership_type", search.ownership_type))
        if search.building_type is not None:
            clauses += [NotNull("building"), AnyEq("building.type", search.building_type)]
        if search.construction_style is not None:
            clauses += [
                NotNull("building"),
                Eq("building.construction_style_attachment", search.construction_style),
            ]
        for path, value in (
            ("address.neighbourhood", search.neighbourhood),
            ("address.community_name", search.community_name),
            ("address.subdivision", search.subdivision),
            ("address.city", search.city),
        ):
            if value is not None:
                clauses.append(Eq(path, value))

        clauses.append(room_count_spec("building.bedrooms_total", search.bedrooms))
        clauses.append(room_count_spec("building.bathroom_total", search.bathrooms))
        clauses.append(price_range_spec(search.min_price, search.max_price))

        if search.min_area_sq_ft is not None:
            clauses += [
                NotNull("building.total_finished_area"),
                Gte("building.total_finished_area.value", search.min_area_sq_ft),
            ]
        if search.postal_code is not None:
            clauses.append(StartsWith("address.postal_code", search.postal_code))
        if search.boundaries is not None:
            clauses.append(boundary_spec(search.boundaries))
        if search.garage:
            clauses += [NotNull("parking_spaces"), ElemMatch("parking_spaces", In("name", GARAGE_TYPES))]
        if search.waterfront:
            clauses.append(NotNull("water_front.type"))
        if search.query and search.query.strip():
            clauses.append(free_text_spec(search.query))

        return all_of(clauses)


def build_listing_spec(search: ListingSearchRequest) -> ListingSpec:
    return ListingPredicateBuilder().build(search)


__all__ = [
    "ListingPredicateBuilder",
    "boundary_spec",
    "build_listing_spec",
    "free_text_spec",
    "price_range_spec",
    "room_count_spec",
]
