"""Root of the realty-query error hierarchy.

Callers branch on ``code``, not on the class.  Codes raised by this package:

``not_found``
    A single-record read (by id, link, MLS number, ...) matched nothing.
``schema_mismatch``
    A dynamic filter key or sort name matches no field of the record type.
``unsupported_type``
    The named field exists but cannot be filtered or sorted on.
``invalid_filter_value`` / ``invalid_enum_value``
    A filter value does not convert to its field's type.
``mapping_not_configured``
    No projection is registered for the requested destination shape.
``connection_error``
    The document store could not be reached.
``config_error`` / ``missing_required_setting`` / ``invalid_setting_value``
    Settings failed to load.

Caller-input failures (``ValidationError`` and its subclasses) add an
``errors`` list with one entry per offending field.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    default_code: str = "realty_query_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """The chained exception, whether passed in or set by ``raise ... from``."""
        return self.__cause__

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Body for log events and error responses; empty ``detail`` is left out."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
