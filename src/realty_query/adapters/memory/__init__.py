"""Memory adapter – in-process document store."""
from realty_query.adapters.memory.store import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
