"""Query composition – predicates, schema registry, filters, sorting, projection, paging."""

from realty_query.application.query.dynamic_filter import (
    DynamicFilterResolver,
    parse_bool,
    parse_enum,
    resolve_filter,
)
from realty_query.application.query.pager import Pager
from realty_query.application.query.predicates import (
    AnyEq,
    AnyIn,
    ContainsIgnoreCase,
    ElemMatch,
    Eq,
    FieldPredicate,
    Gt,
    Gte,
    In,
    IsNull,
    Lt,
    Lte,
    Ne,
    NotEmpty,
    NotNull,
    StartsWith,
    TextSearch,
    mongo_field,
    resolve_path,
    to_bson,
)
from realty_query.application.query.projection import FieldMapping, MappingRegistry, Projector
from realty_query.application.query.schema import FieldInfo, FieldKind, RecordSchema, schema_of
from realty_query.application.query.sorting import SortResolver, mongo_sort, sort_records
from realty_query.application.query.store import DocumentStore

__all__ = [
    "AnyEq",
    "AnyIn",
    "ContainsIgnoreCase",
    "DocumentStore",
    "DynamicFilterResolver",
    "ElemMatch",
    "Eq",
    "FieldInfo",
    "FieldKind",
    "FieldMapping",
    "FieldPredicate",
    "Gt",
    "Gte",
    "In",
    "IsNull",
    "Lt",
    "Lte",
    "MappingRegistry",
    "Ne",
    "NotEmpty",
    "NotNull",
    "Pager",
    "Projector",
    "RecordSchema",
    "SortResolver",
    "StartsWith",
    "TextSearch",
    "mongo_field",
    "mongo_sort",
    "parse_bool",
    "parse_enum",
    "resolve_filter",
    "resolve_path",
    "schema_of",
    "sort_records",
    "to_bson",
]
