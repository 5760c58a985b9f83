"""Unit tests for the in-memory repositories."""
from __future__ import annotations

import asyncio

import pytest

from catalog_engine.adapters.memory import InMemoryCategoryRepository, InMemoryProductRepository
from catalog_engine.domain import Category, Product
from catalog_engine.kernel.errors import NotFoundError


class TestInMemoryProductRepository:
    def test_save_assigns_ids(self) -> None:
        repo = InMemoryProductRepository()

        async def run() -> list[int | None]:
            a = await repo.save(Product(name="A"))
            b = await repo.save(Product(name="B"))
            return [a.id, b.id]

        assert asyncio.run(run()) == [1, 2]

    def test_seeded_ids_are_not_reused(self) -> None:
        repo = InMemoryProductRepository([Product(name="A", id=1), Product(name="B", id=2)])
        saved = asyncio.run(repo.save(Product(name="C")))
        assert saved.id == 3

    def test_returns_copies(self) -> None:
        repo = InMemoryProductRepository([Product(name="A", id=1)])

        async def run() -> str:
            fetched = await repo.get(1)
            assert fetched is not None
            fetched.name = "changed"
            (await repo.fetch_all())[0].name = "changed too"
            again = await repo.get(1)
            assert again is not None
            return again.name

        assert asyncio.run(run()) == "A"

    def test_save_updates_existing(self) -> None:
        repo = InMemoryProductRepository([Product(name="A", id=1)])

        async def run() -> str:
            product = await repo.get(1)
            assert product is not None
            product.name = "A2"
            await repo.save(product)
            stored = await repo.get(1)
            assert stored is not None
            return stored.name

        assert asyncio.run(run()) == "A2"
        assert len(repo) == 1

    def test_get_missing(self) -> None:
        assert asyncio.run(InMemoryProductRepository().get(5)) is None

    def test_delete(self) -> None:
        repo = InMemoryProductRepository([Product(name="A", id=1)])
        asyncio.run(repo.delete(1))
        assert asyncio.run(repo.fetch_all()) == []

    def test_delete_missing_raises(self) -> None:
        with pytest.raises(NotFoundError):
            asyncio.run(InMemoryProductRepository().delete(1))


class TestInMemoryCategoryRepository:
    def test_round_trip(self) -> None:
        repo = InMemoryCategoryRepository()

        async def run() -> Category | None:
            saved = await repo.save(Category(name="Vitrifiye"))
            assert saved.id is not None
            return await repo.get(saved.id)

        found = asyncio.run(run())
        assert found is not None and found.name == "Vitrifiye"
