"""Application search – catalog facets.

Distinct filter values for the listing's drop-downs, plus archive counts.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Iterable

from catalog_engine.kernel.ddd.repository import ProductRepository

_FEATURE_SEPARATORS = re.compile(r"[,;|]")


@dataclasses.dataclass(frozen=True)
class CatalogStats:
    total: int
    active: int
    archived: int


def _distinct(values: Iterable[str | None]) -> list[str]:
    return sorted({v.strip() for v in values if v and v.strip()})


class CatalogFacets:
    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def distinct_categories(self) -> list[str]:
        """Legacy category names and linked category names, merged."""
        products = await self._repository.fetch_all()
        return _distinct(
            [p.category for p in products] + [p.category_entity_name for p in products]
        )

    async def distinct_brands(self) -> list[str]:
        return await self._distinct_field("brand")

    async def distinct_materials(self) -> list[str]:
        return await self._distinct_field("material")

    async def distinct_colors(self) -> list[str]:
        return await self._distinct_field("color")

    async def distinct_features(self) -> list[str]:
        products = await self._repository.fetch_all()
        return _distinct(
            part for p in products if p.features for part in _FEATURE_SEPARATORS.split(p.features)
        )

    async def stats(self) -> CatalogStats:
        products = await self._repository.fetch_all()
        archived = sum(1 for p in products if p.is_archived)
        return CatalogStats(total=len(products), active=len(products) - archived, archived=archived)

    async def _distinct_field(self, field: str) -> list[str]:
        products = await self._repository.fetch_all()
        return _distinct(getattr(p, field) for p in products)


__all__ = ["CatalogFacets", "CatalogStats"]
