"""Application search – SearchResult."""
from __future__ import annotations

import dataclasses

from catalog_engine.application.pagination import Page, total_pages
from catalog_engine.domain.product import Product


@dataclasses.dataclass(frozen=True)
class SearchResult:
    items: list[Product]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return total_pages(self.total_count, self.page_size)

    @classmethod
    def from_page(cls, page: Page[Product]) -> "SearchResult":
        return cls(items=page.items, total_count=page.total, page=page.page, page_size=page.size)


__all__ = ["SearchResult"]
