"""Record types stored in the document store, and their list shapes."""

from realty_query.models.blog import Comment, CommentListItem, Post, PostListItem
from realty_query.models.customer_request import (
    CustomerRequest,
    CustomerRequestListItem,
    CustomerRequestReply,
    RequestInformation,
)
from realty_query.models.enums import (
    BuildingType,
    ConstructionStyleAttachment,
    EventType,
    ListingSource,
    OwnershipType,
    PropertyType,
    TransactionType,
    WaterFrontType,
)
from realty_query.models.event import Event
from realty_query.models.listing import (
    Address,
    Area,
    Building,
    Listing,
    ListingListItem,
    ParkingSpace,
    WaterFront,
)
from realty_query.models.page import Page, PageListItem
from realty_query.models.settings import (
    GenericSettings,
    ListingsSettings,
    Setting,
    SettingsValue,
    WebsiteSettings,
)

__all__ = [
    "Address",
    "Area",
    "Building",
    "BuildingType",
    "Comment",
    "CommentListItem",
    "ConstructionStyleAttachment",
    "CustomerRequest",
    "CustomerRequestListItem",
    "CustomerRequestReply",
    "Event",
    "EventType",
    "GenericSettings",
    "Listing",
    "ListingListItem",
    "ListingSource",
    "ListingsSettings",
    "OwnershipType",
    "Page",
    "PageListItem",
    "ParkingSpace",
    "Post",
    "PostListItem",
    "PropertyType",
    "RequestInformation",
    "Setting",
    "SettingsValue",
    "TransactionType",
    "WaterFront",
    "WebsiteSettings",
]
