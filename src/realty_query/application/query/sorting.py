"""Sort resolution – from a client-supplied field name to a typed sort key.

Names are folded the same way as dynamic filter keys (case and underscores
ignored) and may be dotted paths into nested records, e.g. ``address.city``.
Only scalar fields outside arrays sort; an unknown name fails before the
store is asked anything.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from realty_query.application.pagination.page_request import PaginationRequest, Sort, SortOrder
from realty_query.application.query.predicates import mongo_field, resolve_path
from realty_query.application.query.schema import FieldKind, schema_of
from realty_query.kernel.errors import UnsupportedTypeError


class SortResolver:
    """Resolve sort field names against a record type's schema."""

    def resolve(self, field_name: str, record_type: type) -> str:
        """Return the canonical record path named by *field_name*."""
        infos = schema_of(record_type).walk_path(field_name)
        path = ".".join(info.name for info in infos)
        # no sorting by arrays, nor by a field reached through one
        for info in infos[:-1]:
            if info.kind is FieldKind.SEQUENCE:
                raise UnsupportedTypeError(record_type, path, info.type)
        leaf = infos[-1]
        if leaf.kind in (FieldKind.RECORD, FieldKind.SEQUENCE, FieldKind.MAPPING):
            raise UnsupportedTypeError(record_type, path, leaf.type)
        return path

    def resolve_sort(
        self,
        request: PaginationRequest,
        record_type: type,
        default_field: str | None = None,
        default_order: SortOrder = SortOrder.ASC,
    ) -> Sort | None:
        """Pick the effective sort: the request's field wins over the caller's default.

        An explicit ``request.sort_field`` replaces both *default_field* and
        *default_order*.  ``None`` means the store's natural order, which is
        unspecified.
        """
        if request.sort_field:
            return Sort(self.resolve(request.sort_field, record_type), request.sort_order)
        if default_field:
            return Sort(self.resolve(default_field, record_type), default_order)
        return None


def mongo_sort(sorts: Iterable[Sort]) -> list[tuple[str, int]]:
    return [(mongo_field(s.field), -1 if s.descending else 1) for s in sorts]


def _sort_key(sort: Sort):  # noqa: ANN202
    def key(record: Any) -> tuple[bool, Any]:
        value = resolve_path(record, sort.field)
        return value is not None, value

    return key


def sort_records(records: list[Any], sorts: Sequence[Sort]) -> list[Any]:
    """Sort in process with store semantics: nulls first ascending, last descending."""
    out = list(records)
    for sort in reversed(sorts):
        out.sort(key=_sort_key(sort), reverse=sort.descending)
    return out


__all__ = ["SortResolver", "mongo_sort", "sort_records"]
