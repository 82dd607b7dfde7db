"""Unit tests for the dynamic filter resolver."""

from __future__ import annotations

import pytest

from realty_query.application.query.dynamic_filter import (
    DynamicFilterResolver,
    parse_bool,
    parse_enum,
    resolve_filter,
)
from realty_query.kernel.ddd import TrueSpecification
from realty_query.kernel.errors import (
    InvalidEnumValueError,
    InvalidFilterValueError,
    SchemaMismatchError,
    UnsupportedTypeError,
)
from realty_query.models import Event, EventType, Listing, PropertyType


def _listings() -> list[Listing]:
    return [
        Listing(mls_number="C100", property_type=PropertyType.RESIDENTIAL, price=125000, disabled=True),
        Listing(mls_number="c200", property_type=PropertyType.COMMERCIAL, price=99000, disabled=False),
        Listing(mls_number=None, property_type=None, price=None, disabled=False),
    ]


def _matching(filter_map: dict[str, str | None]) -> list[Listing]:
    spec = resolve_filter(filter_map, Listing)
    return [listing for listing in _listings() if spec.is_satisfied_by(listing)]


class TestParsers:
    @pytest.mark.parametrize("raw,expected", [("true", True), ("False", False), (" TRUE ", True)])
    def test_parse_bool(self, raw: str, expected: bool) -> None:
        assert parse_bool("disabled", raw) is expected

    @pytest.mark.parametrize("raw", ["yes", "1", "", None])
    def test_parse_bool_rejects(self, raw: str | None) -> None:
        with pytest.raises(InvalidFilterValueError):
            parse_bool("disabled", raw)

    def test_parse_enum_by_value_and_name(self) -> None:
        assert parse_enum("property_type", "1", PropertyType) is PropertyType.COMMERCIAL
        assert parse_enum("property_type", "Commercial", PropertyType) is PropertyType.COMMERCIAL
        assert parse_enum("property_type", "multi family", PropertyType) is PropertyType.MULTI_FAMILY

    def test_parse_enum_unknown(self) -> None:
        with pytest.raises(InvalidEnumValueError) as exc:
            parse_enum("property_type", "castle", PropertyType)
        assert exc.value.enum_type is PropertyType
        assert exc.value.value == "castle"

    def test_parse_enum_unknown_number(self) -> None:
        with pytest.raises(InvalidEnumValueError):
            parse_enum("property_type", "42", PropertyType)


class TestResolve:
    def test_empty_map_is_always_true(self) -> None:
        assert resolve_filter({}, Listing) == TrueSpecification()
        assert resolve_filter(None, Listing) == TrueSpecification()

    def test_boolean_equality(self) -> None:
        matched = _matching({"disabled": "true"})
        assert [listing.mls_number for listing in matched] == ["C100"]

    def test_boolean_compiles_to_equality(self) -> None:
        assert resolve_filter({"disabled": "false"}, Listing).to_mongo_filter() == {"disabled": False}

    def test_string_is_case_insensitive_substring(self) -> None:
        matched = _matching({"mlsNumber": "C"})
        assert [listing.mls_number for listing in matched] == ["C100", "c200"]

    def test_number_substring(self) -> None:
        matched = _matching({"price": "250"})
        assert [listing.mls_number for listing in matched] == ["C100"]

    def test_empty_value_means_null(self) -> None:
        matched = _matching({"price": ""})
        assert [listing.mls_number for listing in matched] == [None]

    def test_enum_by_number_and_by_name_are_equivalent(self) -> None:
        by_number = resolve_filter({"propertyType": "1"}, Listing)
        by_name = resolve_filter({"propertyType": "Commercial"}, Listing)
        assert by_number.to_mongo_filter() == by_name.to_mongo_filter() == {"property_type": 1}
        assert [l.mls_number for l in _listings() if by_name.is_satisfied_by(l)] == ["c200"]

    def test_enum_empty_means_null(self) -> None:
        assert resolve_filter({"property_type": ""}, Listing).to_mongo_filter() == {"property_type": None}

    def test_entries_are_anded(self) -> None:
        matched = _matching({"disabled": "false", "mls_number": "2"})
        assert [listing.mls_number for listing in matched] == ["c200"]

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(SchemaMismatchError):
            resolve_filter({"colour": "red"}, Listing)

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(UnsupportedTypeError):
            resolve_filter({"address": "x"}, Listing)

    def test_unsupported_datetime(self) -> None:
        with pytest.raises(UnsupportedTypeError):
            resolve_filter({"created_at": "2024"}, Event)

    def test_invalid_enum_raises_before_store(self) -> None:
        with pytest.raises(InvalidEnumValueError):
            DynamicFilterResolver().resolve({"type": "nope"}, Event)

    def test_event_type_filter(self) -> None:
        spec = DynamicFilterResolver().resolve({"Type": "error"}, Event)
        assert spec.to_mongo_filter() == {"type": int(EventType.ERROR)}
