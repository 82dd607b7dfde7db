"""Application search – "listings like this one".

A candidate must share the reference listing's transaction and property
type.  Building-type tags, the price band and the distance box only apply
when the reference listing has the attribute they derive from.
"""
from __future__ import annotations

from realty_query.application.query.predicates import AnyIn, Eq, Ne, NotNull
from realty_query.application.search.builder import ListingSpec, boundary_spec, price_range_spec
from realty_query.kernel.ddd.specification import all_of
from realty_query.kernel.types import CoordinateBoundary
from realty_query.models.listing import Listing


def price_band(price: float, max_delta: float) -> tuple[float, float]:
    """Symmetric ``price * (1 ± max_delta)`` window."""
    return price * (1 - max_delta), price * (1 + max_delta)


def similar_listings_spec(
    listing: Listing,
    max_price_delta: float = 0.1,
    max_distance_km: float | None = None,
) -> ListingSpec:
    clauses: list[ListingSpec] = [
        Ne("id", listing.id),
        Eq("transaction_type", listing.transaction_type),
        Eq("property_type", listing.property_type),
    ]

    building_types = listing.building.type if listing.building else None
    if building_types:
        clauses += [NotNull("building"), NotNull("building.type"), AnyIn("building.type", building_types)]

    if listing.price is not None:
        clauses.append(price_range_spec(*price_band(listing.price, max_price_delta)))

    coordinates = listing.address.coordinates if listing.address else None
    if max_distance_km is not None and coordinates is not None:
        box = CoordinateBoundary.from_center_and_radius(coordinates, max_distance_km * 1000)
        clauses.append(boundary_spec(box))

    return all_of(clauses)


__all__ = ["price_band", "similar_listings_spec"]
