"""Field predicates over dotted record paths.

Each predicate evaluates in process against dataclass records or plain
mappings and compiles to the equivalent MongoDB filter clause.  Null rules
follow the store: ordering comparisons never match a null or missing
value, ``Ne``/``NotNull`` exclude missing values, ``IsNull`` matches both.
Paths that cross a sequence yield every element's value, and a predicate
holds when any of them matches.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from realty_query.kernel.ddd.specification import BaseSpecification


def resolve_path(record: Any, path: str) -> Any:
    """Walk *path* through attributes or mapping keys; ``None`` when absent."""
    current = record
    for segment in path.split("."):
        if current is None:
            return None
        if isinstance(current, (list, tuple)):
            values = [resolve_path(item, segment) for item in current]
            current = [v for v in values if v is not None]
            continue
        if isinstance(current, Mapping):
            current = current.get(segment)
        else:
            current = getattr(current, segment, None)
    return current


def mongo_field(path: str) -> str:
    """Translate a record path to a document path (``id`` is stored as ``_id``)."""
    if path == "id":
        return "_id"
    if path.startswith("id."):
        return "_id" + path[2:]
    return path


def to_bson(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset, tuple, list)):
        return [to_bson(v) for v in value]
    return value


def _candidates(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _as_text(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


class FieldPredicate(BaseSpecification[Any]):
    """Base for predicates bound to one field path."""

    operator: str = ""

    def __init__(self, path: str) -> None:
        self.path = path

    @property
    def field(self) -> str:
        return mongo_field(self.path)

    def value_of(self, candidate: Any) -> Any:
        return resolve_path(candidate, self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


class _Compare(FieldPredicate):
    def __init__(self, path: str, value: Any) -> None:
        super().__init__(path)
        self.value = value

    def _test(self, actual: Any) -> bool:
        raise NotImplementedError

    def is_satisfied_by(self, candidate: Any) -> bool:
        return any(v is not None and self._test(v) for v in _candidates(self.value_of(candidate)))

    def to_mongo_filter(self) -> dict[str, Any]:
        return {self.field: {self.operator: to_bson(self.value)}}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, {self.value!r})"


class Eq(FieldPredicate):
    """Equality; against a sequence field, any element may match."""

    def __init__(self, path: str, value: Any) -> None:
        super().__init__(path)
        self.value = value

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        if self.value is None:
            return actual is None
        return actual == self.value or any(v == self.value for v in _candidates(actual))

    def to_mongo_filter(self) -> dict[str, Any]:
        return {self.field: to_bson(self.value)}

    def __repr__(self) -> str:
        return f"Eq({self.path!r}, {self.value!r})"


class AnyEq(Eq):
    """Sequence field holds *value* among its elements."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        return isinstance(actual, (list, tuple)) and self.value in actual


class Ne(FieldPredicate):
    def __init__(self, path: str, value: Any) -> None:
        super().__init__(path)
        self.value = value

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        if self.value is None:
            return actual is not None
        return actual != self.value and self.value not in _candidates(actual)

    def to_mongo_filter(self) -> dict[str, Any]:
        return {self.field: {"$ne": to_bson(self.value)}}

    def __repr__(self) -> str:
        return f"Ne({self.path!r}, {self.value!r})"


class NotNull(Ne):
    def __init__(self, path: str) -> None:
        super().__init__(path, None)

    def __repr__(self) -> str:
        return f"NotNull({self.path!r})"


class IsNull(Eq):
    def __init__(self, path: str) -> None:
        super().__init__(path, None)

    def __repr__(self) -> str:
        return f"IsNull({self.path!r})"


class NotEmpty(FieldPredicate):
    """Sequence field is present and has at least one element."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        return isinstance(actual, (list, tuple)) and len(actual) > 0

    def to_mongo_filter(self) -> dict[str, Any]:
        return {f"{self.field}.0": {"$exists": True}}

    def __repr__(self) -> str:
        return f"NotEmpty({self.path!r})"


class Gt(_Compare):
    operator = "$gt"

    def _test(self, actual: Any) -> bool:
        return actual > self.value


class Gte(_Compare):
    operator = "$gte"

    def _test(self, actual: Any) -> bool:
        return actual >= self.value


class Lt(_Compare):
    operator = "$lt"

    def _test(self, actual: Any) -> bool:
        return actual < self.value


class Lte(_Compare):
    operator = "$lte"

    def _test(self, actual: Any) -> bool:
        return actual <= self.value


class In(FieldPredicate):
    """Field value is a member of *values*."""

    def __init__(self, path: str, values: Iterable[Any]) -> None:
        super().__init__(path)
        self.values = frozenset(values)

    def is_satisfied_by(self, candidate: Any) -> bool:
        return any(v is not None and v in self.values for v in _candidates(self.value_of(candidate)))

    def to_mongo_filter(self) -> dict[str, Any]:
        return {self.field: {"$in": sorted(to_bson(self.values), key=repr)}}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r}, {sorted(self.values, key=repr)!r})"


class AnyIn(In):
    """Sequence field shares at least one element with *values*."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        return isinstance(actual, (list, tuple)) and not self.values.isdisjoint(actual)


class StartsWith(FieldPredicate):
    """Anchored prefix match on a string field."""

    def __init__(self, path: str, prefix: str, *, ignore_case: bool = False) -> None:
        super().__init__(path)
        self.prefix = prefix
        self.ignore_case = ignore_case

    def is_satisfied_by(self, candidate: Any) -> bool:
        prefix = self.prefix.casefold() if self.ignore_case else self.prefix
        for v in _candidates(self.value_of(candidate)):
            if not isinstance(v, str):
                continue
            if (v.casefold() if self.ignore_case else v).startswith(prefix):
                return True
        return False

    def to_mongo_filter(self) -> dict[str, Any]:
        clause: dict[str, Any] = {"$regex": "^" + re.escape(self.prefix)}
        if self.ignore_case:
            clause["$options"] = "i"
        return {self.field: clause}

    def __repr__(self) -> str:
        return f"StartsWith({self.path!r}, {self.prefix!r})"


class ContainsIgnoreCase(FieldPredicate):
    """Case-insensitive substring match on the field's string form.

    Numeric fields are compared through their string rendering, so ``"25"``
    matches a price of ``125000``.
    """

    def __init__(self, path: str, text: str, *, numeric: bool = False) -> None:
        super().__init__(path)
        self.text = text
        self.numeric = numeric

    def is_satisfied_by(self, candidate: Any) -> bool:
        needle = self.text.lower()
        return any(
            v is not None and needle in _as_text(v).lower()
            for v in _candidates(self.value_of(candidate))
        )

    def to_mongo_filter(self) -> dict[str, Any]:
        pattern = re.escape(self.text.lower())
        if self.numeric:
            return {
                "$expr": {
                    "$regexMatch": {
                        "input": {"$toLower": {"$toString": "$" + self.field}},
                        "regex": pattern,
                    }
                }
            }
        return {self.field: {"$regex": pattern, "$options": "i"}}

    def __repr__(self) -> str:
        return f"ContainsIgnoreCase({self.path!r}, {self.text!r})"


class ElemMatch(FieldPredicate):
    """Some element of a sequence field satisfies *spec* (paths relative to the element)."""

    def __init__(self, path: str, spec: BaseSpecification[Any]) -> None:
        super().__init__(path)
        self.spec = spec

    def is_satisfied_by(self, candidate: Any) -> bool:
        actual = self.value_of(candidate)
        if not isinstance(actual, (list, tuple)):
            return False
        return any(self.spec.is_satisfied_by(item) for item in actual)

    def to_mongo_filter(self) -> dict[str, Any]:
        return {self.field: {"$elemMatch": self.spec.to_mongo_filter()}}

    def __repr__(self) -> str:
        return f"ElemMatch({self.path!r}, {self.spec!r})"


_WORD = re.compile(r"\w+", re.UNICODE)


class TextSearch(BaseSpecification[Any]):
    """Full-text match.

    The store uses the collection's text index.  In process, a record
    matches when any query word appears as a word in one of *fields*.
    """

    def __init__(self, query: str, fields: Iterable[str] = ()) -> None:
        self.query = query
        self.fields = tuple(fields)

    @classmethod
    def for_record(cls, record_type: type, query: str) -> "TextSearch":
        return cls(query, getattr(record_type, "__text_fields__", ()))

    def is_satisfied_by(self, candidate: Any) -> bool:
        terms = {w.casefold() for w in _WORD.findall(self.query)}
        if not terms:
            return False
        for path in self.fields:
            for value in _candidates(resolve_path(candidate, path)):
                if isinstance(value, str) and terms & {w.casefold() for w in _WORD.findall(value)}:
                    return True
        return False

    def to_mongo_filter(self) -> dict[str, Any]:
        return {"$text": {"$search": self.query}}

    def __repr__(self) -> str:
        return f"TextSearch({self.query!r})"


__all__ = [
    "AnyEq",
    "AnyIn",
    "ContainsIgnoreCase",
    "ElemMatch",
    "Eq",
    "FieldPredicate",
    "Gt",
    "Gte",
    "In",
    "IsNull",
    "Lt",
    "Lte",
    "Ne",
    "NotEmpty",
    "NotNull",
    "StartsWith",
    "TextSearch",
    "mongo_field",
    "resolve_path",
    "to_bson",
]
