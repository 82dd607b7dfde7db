"""MongoDB adapter – motor-backed document store, codec, indexes, client factory."""

from realty_query.adapters.mongodb.codec import DocumentCodec, to_document_value
from realty_query.adapters.mongodb.connection import (
    COLLECTIONS,
    create_client,
    create_indexes,
    get_database,
    ping,
    sanitize_mongodb_url,
    store_for,
)
from realty_query.adapters.mongodb.indexes import create_listing_indexes, create_text_index
from realty_query.adapters.mongodb.store import MongoDocumentStore, field_projection, pushdown_projection

__all__ = [
    "COLLECTIONS",
    "DocumentCodec",
    "MongoDocumentStore",
    "create_client",
    "create_indexes",
    "create_listing_indexes",
    "create_text_index",
    "field_projection",
    "get_database",
    "ping",
    "pushdown_projection",
    "sanitize_mongodb_url",
    "store_for",
    "to_document_value",
]
