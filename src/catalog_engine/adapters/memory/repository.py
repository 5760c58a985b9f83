"""In-memory adapter – dict-backed product and category repositories."""
from __future__ import annotations

import dataclasses
import itertools
from typing import Generic, Iterable, TypeVar

from catalog_engine.domain.category import Category
from catalog_engine.domain.product import Product
from catalog_engine.kernel.ddd.repository import CategoryRepository, ProductRepository
from catalog_engine.kernel.errors import NotFoundError

TRecord = TypeVar("TRecord", Product, Category)


class _InMemoryStore(Generic[TRecord]):
    """Stores copies keyed by id and hands out copies.

    Callers never hold a reference into the store, so changing a fetched
    record has no effect until it is saved.
    """

    def __init__(self, records: Iterable[TRecord] = ()) -> None:
        self._records: dict[int, TRecord] = {}
        self._ids = itertools.count(1)
        for record in records:
            self._put(record)

    def _put(self, record: TRecord) -> TRecord:
        stored = dataclasses.replace(record)
        if stored.id is None:
            stored.id = self._next_id()
        self._records[stored.id] = stored
        return dataclasses.replace(stored)

    def _next_id(self) -> int:
        while True:
            candidate = next(self._ids)
            if candidate not in self._records:
                return candidate

    def _get(self, id: int) -> TRecord | None:  # noqa: A002
        record = self._records.get(id)
        return dataclasses.replace(record) if record is not None else None

    def _all(self) -> list[TRecord]:
        return [dataclasses.replace(r) for r in self._records.values()]

    def __len__(self) -> int:
        return len(self._records)


class InMemoryProductRepository(_InMemoryStore[Product], ProductRepository):
    async def fetch_all(self) -> list[Product]:
        return self._all()

    async def get(self, id: int) -> Product | None:  # noqa: A002
        return self._get(id)

    async def save(self, record: Product) -> Product:
        return self._put(record)

    async def delete(self, id: int) -> None:  # noqa: A002
        if id not in self._records:
            raise NotFoundError("Product", id)
        del self._records[id]


class InMemoryCategoryRepository(_InMemoryStore[Category], CategoryRepository):
    async def fetch_all(self) -> list[Category]:
        return self._all()

    async def get(self, id: int) -> Category | None:  # noqa: A002
        return self._get(id)

    async def save(self, record: Category) -> Category:
        return self._put(record)


__all__ = ["InMemoryCategoryRepository", "InMemoryProductRepository"]
