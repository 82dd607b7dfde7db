"""MongoDB adapter – MongoDocumentStore.

Predicates compile with ``to_mongo_filter`` and run inside the server.  A
projection whose mapping is made only of field paths is pushed down as a
find projection (``{"dest": "$source.path"}``); any other mapping runs per
record after decoding.

Element reads (``count_elements``, ``find_elements``) unwind an array field
in an aggregation pipeline so only the requested window leaves the server.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Sequence, TypeVar

from realty_query.adapters.mongodb.codec import DocumentCodec
from realty_query.application.pagination.page_request import Sort
from realty_query.application.query.predicates import mongo_field
from realty_query.application.query.projection import FieldMapping
from realty_query.application.query.sorting import mongo_sort
from realty_query.kernel.ddd.specification import BaseSpecification

T = TypeVar("T")


def field_projection(fields: Mapping[str, str]) -> dict[str, Any]:
    """``{dest: "$path"}`` for each field, without the document ``_id``."""
    projection: dict[str, Any] = {"_id": 0}
    for dest, path in fields.items():
        projection[dest] = f"${mongo_field(path)}"
    return projection


def pushdown_projection(mapping: FieldMapping[Any, Any]) -> dict[str, Any] | None:
    if mapping.pushdown is None:
        return None
    return field_projection(mapping.pushdown)


class MongoDocumentStore(Generic[T]):
    """Read-only document store over one **motor** collection."""

    def __init__(self, collection: Any, record_type: type[T]) -> None:
        self._col = collection
        self._record_type = record_type
        self._codec = DocumentCodec(record_type)

    @property
    def name(self) -> str:
        return self._col.name

    @property
    def record_type(self) -> type[T]:
        return self._record_type

    @property
    def codec(self) -> DocumentCodec[T]:
        return self._codec

    async def count(self, spec: BaseSpecification[T]) -> int:
        return await self._col.count_documents(spec.to_mongo_filter())

    async def find(
        self,
        spec: BaseSpecification[T],
        *,
        sort: Sequence[Sort] = (),
        skip: int = 0,
        limit: int | None = None,
        projection: FieldMapping[T, Any] | None = None,
    ) -> list[Any]:
        pushed = pushdown_projection(projection) if projection is not None else None
        kwargs: dict[str, Any] = {}
        if pushed is not None:
            kwargs["projection"] = pushed
        if sort:
            kwargs["sort"] = mongo_sort(sort)
        if skip:
            kwargs["skip"] = skip
        if limit is not None:
            kwargs["limit"] = limit
        cursor = self._col.find(spec.to_mongo_filter(), **kwargs)

        if pushed is not None:
            out_codec: DocumentCodec[Any] = DocumentCodec(projection.destination)  # type: ignore[union-attr]
            return [out_codec.decode(doc) async for doc in cursor]
        records = [self._codec.decode(doc) async for doc in cursor]
        return projection.apply_all(records) if projection is not None else records

    async def find_one(self, spec: BaseSpecification[T]) -> T | None:
        doc = await self._col.find_one(spec.to_mongo_filter())
        return self._codec.decode(doc) if doc is not None else None

    async def sample(self, spec: BaseSpecification[T], size: int) -> list[T]:
        if size <= 0:
            return []
        pipeline = [{"$match": spec.to_mongo_filter()}, {"$sample": {"size": size}}]
        return [self._codec.decode(doc) async for doc in self._col.aggregate(pipeline)]

    async def distinct(self, path: str, spec: BaseSpecification[T]) -> list[Any]:
        return list(await self._col.distinct(mongo_field(path), spec.to_mongo_filter()))

    async def count_by(self, path: str, spec: BaseSpecification[T]) -> dict[Any, int]:
        pipeline = [
            {"$match": spec.to_mongo_filter()},
            {"$group": {"_id": f"${mongo_field(path)}", "count": {"$sum": 1}}},
        ]
        return {doc["_id"]: doc["count"] async for doc in self._col.aggregate(pipeline)}

    async def count_elements(self, path: str, spec: BaseSpecification[T]) -> int:
        pipeline = [
            {"$match": spec.to_mongo_filter()},
            {"$unwind": f"${mongo_field(path)}"},
            {"$count": "count"},
        ]
        docs = [doc async for doc in self._col.aggregate(pipeline)]
        return docs[0]["count"] if docs else 0

    async def find_elements(
        self,
        path: str,
        spec: BaseSpecification[T],
        fields: Mapping[str, str],
        destination: type,
        *,
        sort: Sequence[Sort] = (),
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Any]:
        pipeline = [
            {"$match": spec.to_mongo_filter()},
            {"$unwind": f"${mongo_field(path)}"},
            {"$project": field_projection(fields)},
        ]
        if sort:
            # sort keys name destination fields
            pipeline.append({"$sort": {s.field: -1 if s.descending else 1 for s in sort}})
        if skip:
            pipeline.append({"$skip": skip})
        if limit is not None:
            pipeline.append({"$limit": limit})
        codec: DocumentCodec[Any] = DocumentCodec(destination)
        return [codec.decode(doc) async for doc in self._col.aggregate(pipeline)]


__all__ = ["MongoDocumentStore", "field_projection", "pushdown_projection"]
