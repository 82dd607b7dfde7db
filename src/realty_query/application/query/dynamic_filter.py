"""Dynamic filter resolution.

Turns an untyped ``{field name: string value}`` map, typically straight from
an HTTP query string, into a typed predicate over a record type:

* boolean fields parse the value as ``true``/``false`` and test equality;
* string and numeric fields match case-insensitively on substring, and an
  empty value means "field is null";
* enum fields accept a member value (``"1"``) or a member name
  (``"Commercial"``, any case).

Every key is checked against the record's schema before a predicate is
returned, so a malformed filter never reaches the store.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from realty_query.application.query.predicates import ContainsIgnoreCase, Eq, IsNull
from realty_query.application.query.schema import FieldInfo, FieldKind, fold_name, schema_of
from realty_query.kernel.ddd.specification import BaseSpecification, TrueSpecification, all_of
from realty_query.kernel.errors import (
    InvalidEnumValueError,
    InvalidFilterValueError,
    UnsupportedTypeError,
)

_TRUE = "true"
_FALSE = "false"


def parse_bool(field: str, raw: str | None) -> bool:
    value = (raw or "").strip().lower()
    if value == _TRUE:
        return True
    if value == _FALSE:
        return False
    raise InvalidFilterValueError(field, raw or "", "expected 'true' or 'false'")


def parse_enum(field: str, raw: str, enum_type: type[Enum]) -> Enum:
    """Parse *raw* as a member value first, then as a case-insensitive member name."""
    text = raw.strip()
    try:
        number = int(text)
    except ValueError:
        pass
    else:
        for member in enum_type:
            if member.value == number:
                return member
    folded = fold_name(text.replace(" ", "_"))
    for member in enum_type:
        if fold_name(member.name) == folded:
            return member
    raise InvalidEnumValueError(field, raw, enum_type)


class DynamicFilterResolver:
    """Resolve string-keyed filter maps against record schemas."""

    def resolve(
        self,
        filter_map: Mapping[str, str | None] | None,
        record_type: type,
    ) -> BaseSpecification[Any]:
        if not filter_map:
            return TrueSpecification()
        schema = schema_of(record_type)
        return all_of(
            self._resolve_entry(record_type, schema.field(key), value)
            for key, value in filter_map.items()
        )

    def _resolve_entry(
        self, record_type: type, info: FieldInfo, value: str | None
    ) -> BaseSpecification[Any]:
        if info.kind is FieldKind.BOOLEAN:
            return Eq(info.name, parse_bool(info.name, value))
        if info.kind in (FieldKind.STRING, FieldKind.NUMBER):
            if not value:
                return IsNull(info.name)
            return ContainsIgnoreCase(info.name, value, numeric=info.kind is FieldKind.NUMBER)
        if info.kind is FieldKind.ENUM and info.enum_type is not None:
            if not value:
                return IsNull(info.name)
            return Eq(info.name, parse_enum(info.name, value, info.enum_type))
        raise UnsupportedTypeError(record_type, info.name, info.type)


def resolve_filter(
    filter_map: Mapping[str, str | None] | None, record_type: type
) -> BaseSpecification[Any]:
    """Module-level shorthand for :meth:`DynamicFilterResolver.resolve`."""
    return DynamicFilterResolver().resolve(filter_map, record_type)


__all__ = ["DynamicFilterResolver", "parse_bool", "parse_enum", "resolve_filter"]
