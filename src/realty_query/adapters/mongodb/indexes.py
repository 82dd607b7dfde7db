"""MongoDB adapter – index bootstrap.

``TextSearch`` needs one text index per collection, built from the record
type's ``__text_fields__``.  Inside an ``$or`` every other branch must be
indexed too, hence the ``mls_number`` index next to the listings text index.
"""

from __future__ import annotations

from typing import Any

from realty_query.application.query.predicates import mongo_field
from realty_query.models.listing import Listing
from realty_query.observability.logging import get_logger

logger = get_logger(__name__)


async def create_text_index(collection: Any, record_type: type) -> str | None:
    """Create the text index for *record_type*; idempotent."""
    fields = getattr(record_type, "__text_fields__", ())
    if not fields:
        return None
    keys = [(mongo_field(f), "text") for f in fields]
    name = await collection.create_index(keys, name=f"idx_{record_type.__name__.lower()}_text")
    logger.info("mongodb.index_created", collection=collection.name, index=name)
    return name


async def create_listing_indexes(collection: Any) -> None:
    await create_text_index(collection, Listing)
    await collection.create_index([("mls_number", 1)], name="idx_listing_mls_number")
    await collection.create_index([("source", 1), ("last_updated", -1)], name="idx_listing_source_updated")


__all__ = ["create_listing_indexes", "create_text_index"]
