"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config/validation)
    └── InfrastructureError  (infrastructure.py)
        └── PersistenceError
"""

from catalog_engine.kernel.errors.application import ApplicationError
from catalog_engine.kernel.errors.base import BaseError
from catalog_engine.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from catalog_engine.kernel.errors.infrastructure import InfrastructureError, PersistenceError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
]
