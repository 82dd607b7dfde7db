"""Domain enumerations.

Stored by member value, so every enum is an ``IntEnum`` whose value is the
numeric representation a dynamic filter may address directly.
"""

from __future__ import annotations

from enum import IntEnum


class TransactionType(IntEnum):
    FOR_SALE = 0
    FOR_RENT = 1
    FOR_LEASE = 2
    FOR_SALE_OR_RENT = 3


class PropertyType(IntEnum):
    RESIDENTIAL = 0
    COMMERCIAL = 1
    AGRICULTURE = 2
    LAND = 3
    INDUSTRIAL = 4
    MULTI_FAMILY = 5
    OTHER = 6


class OwnershipType(IntEnum):
    FREEHOLD = 0
    CONDOMINIUM = 1
    COOPERATIVE = 2
    TIMESHARE = 3
    LEASEHOLD = 4
    OTHER = 5


class BuildingType(IntEnum):
    HOUSE = 0
    APARTMENT = 1
    ROW_TOWNHOUSE = 2
    DUPLEX = 3
    TRIPLEX = 4
    FOURPLEX = 5
    MOBILE_HOME = 6
    COMMERCIAL = 7
    OTHER = 8


class ConstructionStyleAttachment(IntEnum):
    DETACHED = 0
    SEMI_DETACHED = 1
    ATTACHED = 2
    LINK = 3


class WaterFrontType(IntEnum):
    WATERFRONT = 0
    WATERFRONT_ON_LAKE = 1
    WATERFRONT_ON_RIVER = 2
    WATERFRONT_ON_OCEAN = 3
    CANAL_FRONT = 4


class ListingSource(IntEnum):
    MANUAL = 0
    FEED = 1


class EventType(IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2
    LISTINGS_IMPORT = 3
    CUSTOMER_REQUEST = 4


__all__ = [
    "BuildingType",
    "ConstructionStyleAttachment",
    "EventType",
    "ListingSource",
    "OwnershipType",
    "PropertyType",
    "TransactionType",
    "WaterFrontType",
]
