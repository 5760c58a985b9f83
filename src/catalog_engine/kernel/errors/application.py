"""Application-layer errors."""

from __future__ import annotations

from catalog_engine.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Use-case level failure that is neither a domain rule nor I/O."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
