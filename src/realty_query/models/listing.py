"""Listing record and its nested parts."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime
from typing import ClassVar

from realty_query.kernel.types import Coordinates
from realty_query.models.enums import (
    BuildingType,
    ConstructionStyleAttachment,
    ListingSource,
    OwnershipType,
    PropertyType,
    TransactionType,
    WaterFrontType,
)


@dataclasses.dataclass(kw_only=True)
class Address:
    street_address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    neighbourhood: str | None = None
    community_name: str | None = None
    subdivision: str | None = None
    coordinates: Coordinates | None = None


@dataclasses.dataclass(kw_only=True)
class Area:
    value: float
    unit: str = "sqft"


@dataclasses.dataclass(kw_only=True)
class Building:
    type: list[BuildingType] | None = None
    construction_style_attachment: ConstructionStyleAttachment | None = None
    bedrooms_total: int | None = None
    bathroom_total: int | None = None
    total_finished_area: Area | None = None


@dataclasses.dataclass(kw_only=True)
class ParkingSpace:
    name: str
    spaces: int | None = None


@dataclasses.dataclass(kw_only=True)
class WaterFront:
    type: WaterFrontType | None = None
    name: str | None = None


@dataclasses.dataclass(kw_only=True)
class Listing:
    """A property listing as stored in the ``listings`` collection."""

    __text_fields__: ClassVar[tuple[str, ...]] = (
        "mls_number",
        "description",
        "address.street_address",
        "address.city",
    )

    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    external_id: str | None = None
    source: ListingSource = ListingSource.MANUAL
    mls_number: str | None = None
    transaction_type: TransactionType | None = None
    property_type: PropertyType | None = None
    ownership_type: OwnershipType | None = None
    price: float | None = None
    address: Address | None = None
    building: Building | None = None
    parking_spaces: list[ParkingSpace] | None = None
    water_front: WaterFront | None = None
    photos: list[str] = dataclasses.field(default_factory=list)
    description: str | None = None
    featured: bool = False
    disabled: bool = False
    views: int = 0
    last_updated: datetime | None = None


@dataclasses.dataclass(kw_only=True)
class ListingListItem:
    """Compact listing shape for admin tables and result grids."""

    id: uuid.UUID
    mls_number: str | None = None
    price: float | None = None
    property_type: PropertyType | None = None
    transaction_type: TransactionType | None = None
    address_city: str | None = None
    bedrooms: int | None = None
    featured: bool = False
    disabled: bool = False


__all__ = [
    "Address",
    "Area",
    "Building",
    "Listing",
    "ListingListItem",
    "ParkingSpace",
    "WaterFront",
]
