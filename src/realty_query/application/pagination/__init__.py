"""Application pagination – request/result envelopes and sort criteria."""
from realty_query.application.pagination.page import PaginationResult
from realty_query.application.pagination.page_request import PaginationRequest, Sort, SortOrder

__all__ = ["PaginationRequest", "PaginationResult", "Sort", "SortOrder"]
