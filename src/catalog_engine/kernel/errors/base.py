"""Root of the catalog error hierarchy.

Every error the engine raises on purpose derives from :class:`BaseError`.
Subclasses put their identifying fields (resource, operation, setting) into
``detail`` so that API error bodies and structured log events carry the
same keys.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Catalog error with a machine-readable ``code`` and structured ``detail``.

    Args:
        message: Human-readable description.
        code: Slug for API clients, ``default_code`` when omitted.
        detail: Identifying fields of the failure, JSON-serialisable.
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_code: str = "catalog_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """API error body."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_context(self) -> dict[str, Any]:
        """Flat key-value pairs for a structlog event, e.g. ``log.warning(event, **err.log_context())``."""
        return {"error_code": self.code, **self.detail}


__all__ = ["BaseError"]
