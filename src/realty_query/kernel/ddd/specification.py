"""Specification pattern – composable boolean predicates over records.

Every specification answers two questions: does an in-process record satisfy
it (``is_satisfied_by``) and what MongoDB filter document expresses it
(``to_mongo_filter``).  Stores pick whichever evaluation they support.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications – provides operator overloads.

    Example::

        spec = Eq("property_type", PropertyType.RESIDENTIAL) & NotNull("price")
        spec.is_satisfied_by(listing)
        collection.find(spec.to_mongo_filter())
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abc.abstractmethod
    def to_mongo_filter(self) -> dict[str, Any]: ...

    # Named combinators ------------------------------------------------
    def and_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return self & other

    def or_(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        return self | other

    def not_(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        if isinstance(other, TrueSpecification):
            return self
        return AndSpecification(self, other)

    def __or__(self, other: "BaseSpecification[T]") -> "BaseSpecification[T]":
        if isinstance(other, TrueSpecification):
            return other
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


Specification = BaseSpecification  # type: ignore[misc]


class TrueSpecification(BaseSpecification[T]):
    """Always satisfied; the neutral element of ``&``."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def to_mongo_filter(self) -> dict[str, Any]:
        return {}

    def __and__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:
        return other

    def __or__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TrueSpecification)

    def __hash__(self) -> int:
        return hash(TrueSpecification)

    def __repr__(self) -> str:
        return "TrueSpecification()"


class AndSpecification(BaseSpecification[T]):
    """Conjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    @property
    def operands(self) -> list[BaseSpecification[T]]:
        out: list[BaseSpecification[T]] = []
        for spec in (self._left, self._right):
            if isinstance(spec, AndSpecification):
                out.extend(spec.operands)
            else:
                out.append(spec)
        return out

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)

    def to_mongo_filter(self) -> dict[str, Any]:
        clauses = [f for f in (spec.to_mongo_filter() for spec in self.operands) if f]
        if not clauses:
            return {}
        if len(clauses) == 1:
            return clauses[0]
        return {"$and": clauses}

    def __repr__(self) -> str:
        return f"({self._left!r} & {self._right!r})"


class OrSpecification(BaseSpecification[T]):
    """Disjunction of two specifications."""

    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self._left = left
        self._right = right

    @property
    def operands(self) -> list[BaseSpecification[T]]:
        out: list[BaseSpecification[T]] = []
        for spec in (self._left, self._right):
            if isinstance(spec, OrSpecification):
                out.extend(spec.operands)
            else:
                out.append(spec)
        return out

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)

    def to_mongo_filter(self) -> dict[str, Any]:
        return {"$or": [spec.to_mongo_filter() for spec in self.operands]}

    def __repr__(self) -> str:
        return f"({self._left!r} | {self._right!r})"


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)

    def to_mongo_filter(self) -> dict[str, Any]:
        return {"$nor": [self._spec.to_mongo_filter()]}

    def __repr__(self) -> str:
        return f"~{self._spec!r}"


def all_of(specs: Iterable[BaseSpecification[T]]) -> BaseSpecification[T]:
    """AND together *specs*; an empty iterable yields ``TrueSpecification``."""
    result: BaseSpecification[T] = TrueSpecification()
    for spec in specs:
        result = result & spec
    return result


__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "TrueSpecification",
    "all_of",
]
