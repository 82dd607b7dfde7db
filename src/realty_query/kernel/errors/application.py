"""Application-layer errors – wiring and configuration of use cases."""

from __future__ import annotations

from typing import Any

from realty_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class MappingNotConfiguredError(ApplicationError):
    """No projection is registered between two record shapes."""

    default_code = "mapping_not_configured"

    def __init__(self, source: type, destination: type, **kwargs: Any) -> None:
        super().__init__(
            f"No mapping configured from {source.__name__} to {destination.__name__}",
            detail={"source": source.__name__, "destination": destination.__name__},
            **kwargs,
        )
        self.source = source
        self.destination = destination


__all__ = ["ApplicationError", "MappingNotConfiguredError"]
