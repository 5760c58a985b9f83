"""Infrastructure errors – storage failures."""

from __future__ import annotations

from typing import Any

from catalog_engine.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PersistenceError(InfrastructureError):
    """The storage collaborator failed to read or write records."""

    default_code = "persistence_error"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = {"operation": operation, **(kwargs.pop("detail", None) or {})}
        super().__init__(message or f"Storage operation '{operation}' failed", detail=detail, **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "PersistenceError"]
