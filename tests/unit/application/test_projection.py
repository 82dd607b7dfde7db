"""Unit tests for the mapping registry and projector."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest

from realty_query.application.facades.mappings import default_registry
from realty_query.application.query.projection import MappingRegistry, Projector
from realty_query.kernel.errors import MappingNotConfiguredError, SchemaMismatchError
from realty_query.models import (
    Address,
    Building,
    Comment,
    CustomerRequest,
    CustomerRequestListItem,
    Listing,
    ListingListItem,
    Post,
    PostListItem,
    RequestInformation,
)


@dataclasses.dataclass
class CityOnly:
    city: str | None = None


@dataclasses.dataclass
class NeedsMissing:
    nonexistent: str


class TestIdentity:
    def test_same_type_returns_same_object(self) -> None:
        registry = MagicMock(spec=MappingRegistry)
        projector = Projector(registry)
        listing = Listing()
        assert projector.project(listing, Listing) is listing
        registry.get.assert_not_called()

    def test_compile_identity_is_none(self) -> None:
        assert Projector().compile(Listing, Listing) is None
        assert Projector().compile(Listing, None) is None

    def test_project_many_identity(self) -> None:
        records = [Listing(), Listing()]
        assert Projector().project_many(records, Listing, Listing) == records


class TestNotConfigured:
    def test_compile_raises(self) -> None:
        with pytest.raises(MappingNotConfiguredError) as exc:
            Projector().compile(Listing, ListingListItem)
        assert exc.value.source is Listing
        assert exc.value.destination is ListingListItem


class TestDerivedMappings:
    def test_same_named_and_override_fields(self) -> None:
        registry = MappingRegistry()
        registry.register(Listing, ListingListItem, bedrooms="building.bedrooms_total")
        listing = Listing(
            mls_number="X1",
            price=10.0,
            address=Address(city="Kingston"),
            building=Building(bedrooms_total=3),
        )
        item = Projector(registry).project(listing, ListingListItem)
        assert item == ListingListItem(
            id=listing.id,
            mls_number="X1",
            price=10.0,
            address_city="Kingston",
            bedrooms=3,
        )

    def test_path_only_mapping_has_pushdown(self) -> None:
        registry = MappingRegistry()
        mapping = registry.register(Listing, ListingListItem, bedrooms="building.bedrooms_total")
        assert mapping.pushdown is not None
        assert mapping.pushdown["address_city"] == "address.city"
        assert mapping.pushdown["bedrooms"] == "building.bedrooms_total"

    def test_callable_mapping_has_no_pushdown(self) -> None:
        registry = MappingRegistry()
        mapping = registry.register(Post, PostListItem, comments_count=lambda p: len(p.comments))
        assert mapping.pushdown is None
        post = Post(title="t", link="l", publish_date=datetime(2024, 1, 1, tzinfo=UTC), comments=[Comment()])
        assert mapping(post).comments_count == 1

    def test_flattened_names(self) -> None:
        mapping = default_registry().get(CustomerRequest, CustomerRequestListItem)
        assert mapping is not None
        request = CustomerRequest(
            date_time_utc=datetime(2024, 1, 1, tzinfo=UTC),
            request=RequestInformation(name="Ann", email="ann@example.com"),
        )
        item = mapping(request)
        assert item.request_name == "Ann"
        assert item.request_email == "ann@example.com"

    def test_optional_destination_fields_may_stay_unmapped(self) -> None:
        mapping = MappingRegistry().register(Listing, CityOnly)
        assert mapping(Listing()) == CityOnly()

    def test_required_unmappable_field_raises(self) -> None:
        with pytest.raises(SchemaMismatchError):
            MappingRegistry().register(Listing, NeedsMissing)

    def test_unknown_override_path_raises(self) -> None:
        with pytest.raises(SchemaMismatchError):
            MappingRegistry().register(Listing, CityOnly, city="address.town")

    def test_explicit_converter(self) -> None:
        registry = MappingRegistry()
        registry.register(Listing, str, lambda listing: str(listing.id))
        uid = uuid.uuid4()
        assert Projector(registry).project(Listing(id=uid), str) == str(uid)
        assert (Listing, str) in registry
        assert len(registry) == 1

    def test_converter_and_overrides_are_exclusive(self) -> None:
        with pytest.raises(TypeError):
            MappingRegistry().register(Listing, CityOnly, lambda listing: CityOnly(), city="address.city")
