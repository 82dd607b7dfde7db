"""Projection of stored records into other output shapes.

Mappings are registered once per ``(source, destination)`` pair.  Without an
explicit converter the registry derives one from the destination
dataclass: every destination field is filled from an override (a dotted
source path or a callable), the same-named source field, or a flattened
source path (``address_city`` reads ``address.city``).  Destination fields
with defaults may stay unmapped; required ones must resolve at
registration time.

A mapping made only of paths can also run inside the store:
``pushdown`` maps destination fields to source paths for a query-time
projection.  Mappings that involve callables run per record.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, TypeVar

from realty_query.application.query.predicates import resolve_path
from realty_query.application.query.schema import schema_of
from realty_query.kernel.errors import MappingNotConfiguredError, SchemaMismatchError

S = TypeVar("S")
D = TypeVar("D")

FieldSource = str | Callable[[Any], Any]


@dataclasses.dataclass(frozen=True)
class FieldMapping(Generic[S, D]):
    """A resolved conversion from one record shape to another."""

    source: type[S]
    destination: type[D]
    convert: Callable[[S], D]
    pushdown: dict[str, str] | None = None

    def __call__(self, record: S) -> D:
        return self.convert(record)

    def apply_all(self, records: Iterable[S]) -> list[D]:
        return [self.convert(r) for r in records]


def _derive(source: type, destination: type, overrides: dict[str, FieldSource]) -> FieldMapping[Any, Any]:
    if not dataclasses.is_dataclass(destination):
        raise TypeError(f"Cannot derive a mapping into non-dataclass {destination!r}; pass a converter")
    source_schema = schema_of(source)
    getters: dict[str, FieldSource] = {}
    for f in dataclasses.fields(destination):
        if f.name in overrides:
            override = overrides[f.name]
            getters[f.name] = source_schema.resolve_path(override)[0] if isinstance(override, str) else override
            continue
        path = source_schema.flattened_path(f.name)
        if path is not None:
            getters[f.name] = path
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise SchemaMismatchError(source, f.name)

    unknown = set(overrides) - set(getters)
    if unknown:
        raise SchemaMismatchError(destination, sorted(unknown)[0])

    def convert(record: Any) -> Any:
        values = {
            name: getter(record) if callable(getter) else resolve_path(record, getter)
            for name, getter in getters.items()
        }
        return destination(**values)

    pushdown = None
    if all(isinstance(g, str) for g in getters.values()):
        pushdown = {name: str(g) for name, g in getters.items()}
    return FieldMapping(source, destination, convert, pushdown)


class MappingRegistry:
    """Read-only after start-up: ``(source, destination) -> FieldMapping``."""

    def __init__(self) -> None:
        self._mappings: dict[tuple[type, type], FieldMapping[Any, Any]] = {}

    def register(
        self,
        source: type[S],
        destination: type[D],
        converter: Callable[[S], D] | None = None,
        **overrides: FieldSource,
    ) -> FieldMapping[S, D]:
        if converter is not None:
            if overrides:
                raise TypeError("Pass either a converter or field overrides, not both")
            mapping: FieldMapping[Any, Any] = FieldMapping(source, destination, converter)
        else:
            mapping = _derive(source, destination, overrides)
        self._mappings[(source, destination)] = mapping
        return mapping

    def get(self, source: type[S], destination: type[D]) -> FieldMapping[S, D] | None:
        return self._mappings.get((source, destination))

    def __contains__(self, pair: object) -> bool:
        return pair in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)


class Projector:
    """Reshape records through a :class:`MappingRegistry`.

    Projecting into the record's own type is the identity: no mapping is
    consulted and the same object comes back.
    """

    def __init__(self, registry: MappingRegistry | None = None) -> None:
        self._registry = registry or MappingRegistry()

    @property
    def registry(self) -> MappingRegistry:
        return self._registry

    def compile(self, source: type[S], destination: type[D] | None) -> FieldMapping[S, D] | None:
        """Return the mapping to apply, ``None`` for identity.

        Raises :class:`MappingNotConfiguredError` before any query is issued
        when the pair has no registered mapping.
        """
        if destination is None or destination is source:
            return None
        mapping = self._registry.get(source, destination)
        if mapping is None:
            raise MappingNotConfiguredError(source, destination)
        return mapping

    def project(self, record: S, destination: type[D]) -> D:
        mapping = self.compile(type(record), destination)
        if mapping is None:
            return record  # type: ignore[return-value]
        return mapping(record)

    def project_many(self, records: Iterable[S], source: type[S], destination: type[D]) -> list[D]:
        mapping = self.compile(source, destination)
        if mapping is None:
            return list(records)  # type: ignore[arg-type]
        return mapping.apply_all(records)


__all__ = ["FieldMapping", "MappingRegistry", "Projector"]
