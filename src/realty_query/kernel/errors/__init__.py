"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── NotFoundError
    │   └── ValidationError
    │       ├── SchemaMismatchError
    │       ├── UnsupportedTypeError
    │       └── InvalidFilterValueError
    │           └── InvalidEnumValueError
    ├── ApplicationError     (application.py)
    │   └── MappingNotConfiguredError
    └── InfrastructureError  (infrastructure.py)
        └── ConnectionError
"""

from realty_query.kernel.errors.application import (
    ApplicationError,
    MappingNotConfiguredError,
)
from realty_query.kernel.errors.base import BaseError
from realty_query.kernel.errors.domain import (
    DomainError,
    InvalidEnumValueError,
    InvalidFilterValueError,
    NotFoundError,
    SchemaMismatchError,
    UnsupportedTypeError,
    ValidationError,
)
from realty_query.kernel.errors.infrastructure import (
    ConnectionError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "InvalidEnumValueError",
    "InvalidFilterValueError",
    "MappingNotConfiguredError",
    "NotFoundError",
    "SchemaMismatchError",
    "UnsupportedTypeError",
    "ValidationError",
]
