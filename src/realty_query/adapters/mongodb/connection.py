"""MongoDB adapter – client factory and collection wiring."""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure

from realty_query.adapters.mongodb.indexes import create_listing_indexes, create_text_index
from realty_query.adapters.mongodb.store import MongoDocumentStore
from realty_query.config.settings.app import DatabaseSettings
from realty_query.kernel.errors import ConnectionError
from realty_query.models import CustomerRequest, Event, Listing, Page, Post, Setting
from realty_query.observability.logging import get_logger

logger = get_logger(__name__)

COLLECTIONS: dict[type, str] = {
    Listing: "listings",
    Post: "posts",
    Page: "pages",
    CustomerRequest: "customer_requests",
    Event: "events",
    Setting: "settings",
}


def sanitize_mongodb_url(url: str) -> str:
    """Hide the password in a MongoDB URL for safe logging."""
    if "://" not in url:
        return url
    protocol, rest = url.split("://", 1)
    if "@" not in rest:
        return url
    credentials, host = rest.rsplit("@", 1)
    username = credentials.split(":", 1)[0]
    return f"{protocol}://{username}:***@{host}"


def create_client(settings: DatabaseSettings) -> AsyncIOMotorClient:
    logger.info(
        "mongodb.client_created",
        url=sanitize_mongodb_url(settings.connection_string),
        database=settings.database_name,
    )
    return AsyncIOMotorClient(
        settings.connection_string,
        tz_aware=True,
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )


def get_database(client: AsyncIOMotorClient, settings: DatabaseSettings) -> AsyncIOMotorDatabase:
    return client[settings.database_name]


async def ping(client: AsyncIOMotorClient) -> None:
    """Raise :class:`ConnectionError` when the server is unreachable."""
    try:
        await client.admin.command("ping")
    except ConnectionFailure as exc:
        raise ConnectionError("mongodb", str(exc)) from exc


def store_for(database: Any, record_type: type) -> MongoDocumentStore[Any]:
    return MongoDocumentStore(database[COLLECTIONS[record_type]], record_type)


async def create_indexes(database: Any) -> None:
    await create_listing_indexes(database[COLLECTIONS[Listing]])
    await create_text_index(database[COLLECTIONS[Post]], Post)


__all__ = [
    "COLLECTIONS",
    "create_client",
    "create_indexes",
    "get_database",
    "ping",
    "sanitize_mongodb_url",
    "store_for",
]
