"""Specification building blocks – public re-export surface."""

from realty_query.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    Specification,
    TrueSpecification,
    all_of,
)

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "TrueSpecification",
    "all_of",
]
