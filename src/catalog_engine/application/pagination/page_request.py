"""Application pagination – PageRequest."""
from __future__ import annotations

import dataclasses

from catalog_engine.kernel.errors import ValidationError

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination parameters."""
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE
    max_size: int = dataclasses.field(default=MAX_PAGE_SIZE, compare=False)

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field("page", "must be >= 1")
        if self.size < 1 or self.size > self.max_size:
            raise ValidationError.for_field("page_size", f"must be between 1 and {self.max_size}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "PageRequest"]
