"""Config settings – database and query settings of the realty query layer."""
from __future__ import annotations

import dataclasses

from realty_query.config.settings.base import Settings
from realty_query.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class DatabaseSettings(Settings):
    """``DATABASE_CONNECTION_STRING``, ``DATABASE_DATABASE_NAME``, ..."""

    _prefix = "DATABASE"

    connection_string: str = "mongodb://localhost:27017"
    database_name: str = "realty"
    server_selection_timeout_ms: int = 5000

    def _validate(self) -> None:
        if not self.connection_string.startswith(("mongodb://", "mongodb+srv://")):
            raise InvalidSettingValueError(
                "connection_string", self.connection_string, "must be a mongodb:// URL", secret=True
            )
        if not self.database_name:
            raise InvalidSettingValueError("database_name", self.database_name, "must not be empty")
        if self.server_selection_timeout_ms <= 0:
            raise InvalidSettingValueError(
                "server_selection_timeout_ms", self.server_selection_timeout_ms, "must be positive"
            )


@dataclasses.dataclass
class QuerySettings(Settings):
    _prefix = "QUERY"

    similar_max_price_delta: float = 0.1
    suggestions_limit: int = 5
    featured_limit: int = 10

    def _validate(self) -> None:
        if not 0 <= self.similar_max_price_delta < 1:
            raise InvalidSettingValueError(
                "similar_max_price_delta", self.similar_max_price_delta, "must be in [0, 1)"
            )
        for name in ("suggestions_limit", "featured_limit"):
            if getattr(self, name) < 0:
                raise InvalidSettingValueError(name, getattr(self, name), "must be >= 0")


__all__ = ["DatabaseSettings", "QuerySettings"]
