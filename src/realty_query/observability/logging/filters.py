"""Observability – redaction of settings secrets and contact details in log events.

Keys are compared after folding case and underscores, the same way query
field names are matched, so ``connectionString``, ``ConnectionString`` and
``connection_string`` are all redacted.  Customer requests carry contact
details (``email``, ``phone``) nested inside lists and records; those are
walked too.
"""
from __future__ import annotations

from typing import Any, Final

DEFAULT_SENSITIVE_FIELDS: Final[frozenset[str]] = frozenset(
    {"password", "connection_string", "mongodb_url", "url", "secret", "token", "email", "phone"}
)


def _fold(key: str) -> str:
    return key.replace("_", "").casefold()


class SensitiveFieldsFilter:
    """structlog processor that masks sensitive values anywhere in an event."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(_fold(f) for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def is_sensitive(self, key: Any) -> bool:
        return isinstance(key, str) and _fold(key) in self._fields

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: self.REDACTED if self.is_sensitive(k) else self._redact_value(v) for k, v in data.items()}

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact_value(v) for v in value)
        return value

    def __call__(self, logger: Any, method: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
