"""
realty_query – query composition and pagination over the realty document store.

Import path convention::

    from realty_query.application.facades import ListingsQueries
    from realty_query.application.search import ListingSearchRequest
    from realty_query.application.pagination import PaginationRequest
    from realty_query.adapters.mongodb import MongoDocumentStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
