"""MongoDB adapter – DocumentCodec.

Records are dataclasses; documents are BSON-ready dicts.  Enums are stored
by value and the record ``id`` lives in ``_id``.  Decoding validates with
pydantic so nested dataclasses, enums and UUIDs come back typed.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import pydantic

T = TypeVar("T")


def to_document_value(value: Any) -> Any:
    """Replace enum members with their values, recursively."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: to_document_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_document_value(v) for v in value]
    return value


class DocumentCodec(Generic[T]):
    def __init__(self, record_type: type[T]) -> None:
        self.record_type = record_type
        self._adapter = pydantic.TypeAdapter(record_type)

    def encode(self, record: T) -> dict[str, Any]:
        doc = to_document_value(self._adapter.dump_python(record, mode="python"))
        if "id" in doc:
            doc["_id"] = doc.pop("id")
        return doc

    def decode(self, doc: dict[str, Any]) -> T:
        data = dict(doc)
        if "_id" in data:
            data["id"] = data.pop("_id")
        return self._adapter.validate_python(data)


__all__ = ["DocumentCodec", "to_document_value"]
