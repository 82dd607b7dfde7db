"""Domain errors – lookups and query-construction failures."""

from __future__ import annotations

from typing import Any

from realty_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """A single-record lookup matched nothing."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class SchemaMismatchError(ValidationError):
    """A field name supplied at the boundary names no field of the record type."""

    default_code = "schema_mismatch"

    def __init__(self, record_type: type, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"{record_type.__name__} has no field matching '{field}'",
            errors=[{"field": field, "record_type": record_type.__name__}],
            **kwargs,
        )
        self.record_type = record_type
        self.field = field


class UnsupportedTypeError(ValidationError):
    """A dynamic filter targets a field whose type cannot be compared."""

    default_code = "unsupported_type"

    def __init__(self, record_type: type, field: str, field_type: Any, **kwargs: Any) -> None:
        type_name = getattr(field_type, "__name__", repr(field_type))
        super().__init__(
            f"Unsupported type {type_name} for filter on {record_type.__name__}.{field}",
            errors=[{"field": field, "type": type_name}],
            **kwargs,
        )
        self.record_type = record_type
        self.field = field
        self.field_type = field_type


class InvalidFilterValueError(ValidationError):
    """A dynamic filter value cannot be parsed for its target field."""

    default_code = "invalid_filter_value"

    def __init__(self, field: str, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid value {value!r} for '{field}': {reason}",
            errors=[{"field": field, "value": value, "reason": reason}],
            **kwargs,
        )
        self.field = field
        self.value = value
        self.reason = reason


class InvalidEnumValueError(InvalidFilterValueError):
    """The value matches neither a member value nor a member name of the enum."""

    default_code = "invalid_enum_value"

    def __init__(self, field: str, value: str, enum_type: type, **kwargs: Any) -> None:
        super().__init__(
            field,
            value,
            f"can't convert into enum {enum_type.__module__}.{enum_type.__qualname__}",
            **kwargs,
        )
        self.enum_type = enum_type


__all__ = [
    "DomainError",
    "InvalidEnumValueError",
    "InvalidFilterValueError",
    "NotFoundError",
    "SchemaMismatchError",
    "UnsupportedTypeError",
    "ValidationError",
]
