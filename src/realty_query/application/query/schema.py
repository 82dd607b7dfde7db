"""Field registry for record types.

``schema_of(Listing)`` inspects the dataclass once and caches, per field,
what kind of value it holds.  Boundary input (filter keys, sort names,
projection paths) is resolved against this registry instead of poking at
attributes ad hoc.

Name folding: lookups ignore case and underscores, so ``propertyType``,
``PropertyType`` and ``property_type`` all address ``property_type``.
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from realty_query.kernel.errors import SchemaMismatchError


class FieldKind(str, Enum):
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


_SEQUENCE_ORIGINS = (list, tuple, set, frozenset)


@dataclasses.dataclass(frozen=True, slots=True)
class FieldInfo:
    """What the registry knows about one field of a record type."""

    name: str
    type: Any
    kind: FieldKind
    nullable: bool = False
    enum_type: type[Enum] | None = None
    record_type: type | None = None

    @property
    def is_comparable(self) -> bool:
        return self.kind in (FieldKind.BOOLEAN, FieldKind.STRING, FieldKind.NUMBER, FieldKind.ENUM)


def fold_name(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        nullable = len(args) != len(typing.get_args(annotation))
        if len(args) == 1:
            return args[0], nullable
        return annotation, nullable
    return annotation, False


def _classify(annotation: Any) -> tuple[FieldKind, type[Enum] | None, type | None]:
    origin = typing.get_origin(annotation)
    if origin in _SEQUENCE_ORIGINS:
        args = typing.get_args(annotation)
        item = args[0] if args else Any
        return FieldKind.SEQUENCE, None, item if dataclasses.is_dataclass(item) else None
    if origin is dict:
        return FieldKind.MAPPING, None, None
    if not isinstance(annotation, type):
        return FieldKind.OTHER, None, None
    # Enum before int: IntEnum members are ints too.
    if issubclass(annotation, Enum):
        return FieldKind.ENUM, annotation, None
    if issubclass(annotation, bool):
        return FieldKind.BOOLEAN, None, None
    if issubclass(annotation, str):
        return FieldKind.STRING, None, None
    if issubclass(annotation, (int, float, Decimal)):
        return FieldKind.NUMBER, None, None
    if dataclasses.is_dataclass(annotation):
        return FieldKind.RECORD, None, annotation
    return FieldKind.OTHER, None, None


class RecordSchema:
    """Registry of the fields of one dataclass record type."""

    def __init__(self, record_type: type) -> None:
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass record type")
        self.record_type = record_type
        hints = typing.get_type_hints(record_type)
        self.fields: dict[str, FieldInfo] = {}
        for f in dataclasses.fields(record_type):
            annotation, nullable = _unwrap_optional(hints[f.name])
            kind, enum_type, nested = _classify(annotation)
            self.fields[f.name] = FieldInfo(
                name=f.name,
                type=annotation,
                kind=kind,
                nullable=nullable,
                enum_type=enum_type,
                record_type=nested,
            )
        self._folded = {fold_name(name): info for name, info in self.fields.items()}

    def find(self, key: str) -> FieldInfo | None:
        return self.fields.get(key) or self._folded.get(fold_name(key))

    def field(self, key: str) -> FieldInfo:
        info = self.find(key)
        if info is None:
            raise SchemaMismatchError(self.record_type, key)
        return info

    def walk_path(self, path: str) -> list[FieldInfo]:
        """Field info for every segment of a dotted, loosely-cased path.

        Segments may descend through nested records and through sequences of
        records (``parking_spaces.name``).
        """
        schema: RecordSchema = self
        infos: list[FieldInfo] = []
        for segment in path.split("."):
            if infos:
                if infos[-1].record_type is None:
                    raise SchemaMismatchError(self.record_type, path)
                schema = schema_of(infos[-1].record_type)
            info = schema.find(segment)
            if info is None:
                raise SchemaMismatchError(self.record_type, path)
            infos.append(info)
        return infos

    def resolve_path(self, path: str) -> tuple[str, FieldInfo]:
        """Resolve a dotted, loosely-cased path to ``(canonical_path, leaf)``."""
        infos = self.walk_path(path)
        return ".".join(info.name for info in infos), infos[-1]

    def flattened_path(self, name: str) -> str | None:
        """Map a flattened name such as ``address_city`` to ``address.city``."""
        direct = self.fields.get(name)
        if direct is not None:
            return direct.name
        tokens = name.split("_")
        for i in range(1, len(tokens)):
            head = self.fields.get("_".join(tokens[:i]))
            if head is None or head.kind is not FieldKind.RECORD or head.record_type is None:
                continue
            rest = schema_of(head.record_type).flattened_path("_".join(tokens[i:]))
            if rest is not None:
                return f"{head.name}.{rest}"
        return None

    def __repr__(self) -> str:
        return f"RecordSchema({self.record_type.__name__}, fields={list(self.fields)})"


@functools.cache
def schema_of(record_type: type) -> RecordSchema:
    """Return the cached :class:`RecordSchema` for *record_type*."""
    return RecordSchema(record_type)


__all__ = ["FieldInfo", "FieldKind", "RecordSchema", "fold_name", "schema_of"]
