"""Application pagination – Page and slicing helpers."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

from catalog_engine.application.pagination.page_request import PageRequest

T = TypeVar("T")


def paginate(sequence: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return up to *page_size* items starting at ``(page - 1) * page_size``."""
    offset = (page - 1) * page_size
    return list(sequence[offset: offset + page_size])


def total_pages(total: int, page_size: int) -> int:
    if page_size <= 0 or total <= 0:
        return 0
    return math.ceil(total / page_size)


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results.

    ``total`` counts the whole filtered sequence, never just ``items``.
    """

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )

    @classmethod
    def of(cls, all_items: Sequence[T], request: PageRequest) -> "Page[T]":
        """Slice the full, already filtered and sorted sequence."""
        return cls(
            items=paginate(all_items, request.page, request.size),
            total=len(all_items),
            page=request.page,
            size=request.size,
        )


__all__ = ["Page", "paginate", "total_pages"]
