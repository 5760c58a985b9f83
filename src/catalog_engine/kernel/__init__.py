"""Kernel – framework-agnostic building blocks (errors, predicates, ports, time)."""

from catalog_engine.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

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
