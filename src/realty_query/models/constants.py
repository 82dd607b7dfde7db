"""Read-only category sets used by listing search."""

from __future__ import annotations

from typing import Final

from realty_query.models.enums import TransactionType

# The UI offers "for sale" / "for rent"; storage keeps finer transaction types.
SALE_TYPES: Final[frozenset[TransactionType]] = frozenset(
    {TransactionType.FOR_SALE, TransactionType.FOR_SALE_OR_RENT}
)
RENT_TYPES: Final[frozenset[TransactionType]] = frozenset(
    {TransactionType.FOR_RENT, TransactionType.FOR_LEASE}
)

GARAGE_TYPES: Final[frozenset[str]] = frozenset(
    {
        "Garage",
        "Attached Garage",
        "Detached Garage",
        "Heated Garage",
        "Underground",
        "Inside Entry",
        "Oversize",
    }
)

__all__ = ["GARAGE_TYPES", "RENT_TYPES", "SALE_TYPES"]
