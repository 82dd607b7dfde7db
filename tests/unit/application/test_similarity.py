"""Unit tests for similar-listing predicates."""

from __future__ import annotations

import uuid

import pytest

from realty_query.application.search import price_band, similar_listings_spec
from realty_query.kernel.types import Coordinates
from realty_query.models import (
    Address,
    Building,
    BuildingType,
    Listing,
    PropertyType,
    TransactionType,
)


def _reference(**kwargs: object) -> Listing:
    values: dict[str, object] = {
        "transaction_type": TransactionType.FOR_SALE,
        "property_type": PropertyType.RESIDENTIAL,
        "price": 500_000.0,
    }
    values.update(kwargs)
    return Listing(**values)  # type: ignore[arg-type]


def _candidate(**kwargs: object) -> Listing:
    return _reference(**kwargs)


class TestPriceBand:
    def test_ten_percent(self) -> None:
        low, high = price_band(500_000, 0.1)
        assert low == pytest.approx(450_000)
        assert high == pytest.approx(550_000)


class TestSimilarListings:
    def test_excludes_reference_itself(self) -> None:
        ref = _reference()
        spec = similar_listings_spec(ref)
        assert not spec.is_satisfied_by(ref)
        assert spec.is_satisfied_by(_candidate(id=uuid.uuid4()))

    @pytest.mark.parametrize(("price", "expected"), [(450_000.0, True), (550_000.0, True), (449_999.0, False), (550_001.0, False)])
    def test_price_band_inclusive(self, price: float, expected: bool) -> None:
        spec = similar_listings_spec(_reference(), max_price_delta=0.1)
        assert spec.is_satisfied_by(_candidate(price=price)) is expected

    def test_candidate_without_price_excluded(self) -> None:
        assert not similar_listings_spec(_reference()).is_satisfied_by(_candidate(price=None))

    def test_transaction_and_property_type_must_match(self) -> None:
        spec = similar_listings_spec(_reference())
        assert not spec.is_satisfied_by(_candidate(transaction_type=TransactionType.FOR_RENT))
        assert not spec.is_satisfied_by(_candidate(property_type=PropertyType.LAND))

    def test_building_types_intersect(self) -> None:
        ref = _reference(building=Building(type=[BuildingType.HOUSE, BuildingType.DUPLEX]))
        spec = similar_listings_spec(ref)
        assert spec.is_satisfied_by(_candidate(building=Building(type=[BuildingType.DUPLEX])))
        assert not spec.is_satisfied_by(_candidate(building=Building(type=[BuildingType.APARTMENT])))
        assert not spec.is_satisfied_by(_candidate())

    def test_optional_criteria_skipped_when_reference_lacks_them(self) -> None:
        ref = _reference(price=None)
        spec = similar_listings_spec(ref, max_distance_km=5)
        assert spec.is_satisfied_by(_candidate(price=1.0, building=Building(type=[BuildingType.OTHER])))

    def test_distance_box(self) -> None:
        ref = _reference(address=Address(coordinates=Coordinates(44.23, -76.48)))
        spec = similar_listings_spec(ref, max_distance_km=5)
        near = _candidate(address=Address(coordinates=Coordinates(44.25, -76.50)))
        far = _candidate(address=Address(coordinates=Coordinates(45.42, -75.69)))
        assert spec.is_satisfied_by(near)
        assert not spec.is_satisfied_by(far)
        assert not spec.is_satisfied_by(_candidate())

    def test_filter_starts_with_identity_and_types(self) -> None:
        ref = _reference(price=None)
        clauses = similar_listings_spec(ref).to_mongo_filter()["$and"]
        assert clauses == [
            {"_id": {"$ne": ref.id}},
            {"transaction_type": 0},
            {"property_type": 0},
        ]
