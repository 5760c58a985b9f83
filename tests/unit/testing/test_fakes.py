"""Unit tests for the catalog testing fakes and builders."""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime

import pytest
from hypothesis import given

from catalog_engine.domain import Product
from catalog_engine.testing import FakeClock, FlakyProductRepository, ProductBuilder, StorageFault
from catalog_engine.testing.strategies import products


class TestFakeClock:
    def test_pinned(self) -> None:
        assert FakeClock().now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_instances_are_independent(self) -> None:
        a, b = FakeClock(), FakeClock()
        a.advance(days=1)
        assert b.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestFlakyProductRepository:
    def test_behaves_like_memory_repository_by_default(self) -> None:
        repo = FlakyProductRepository([Product(name="A", id=1)])
        found = asyncio.run(repo.get(1))
        assert found is not None and found.name == "A"

    @pytest.mark.parametrize(
        "kwargs, call",
        [
            ({"fail_on_get": {1}}, lambda r: r.get(1)),
            ({"fail_on_save": {1}}, lambda r: r.save(Product(name="A", id=1))),
            ({"fail_on_delete": {1}}, lambda r: r.delete(1)),
            ({"fail_fetch_all": True}, lambda r: r.fetch_all()),
        ],
    )
    def test_injected_faults(self, kwargs: dict, call) -> None:  # type: ignore[no-untyped-def]
        repo = FlakyProductRepository([Product(name="A", id=1)], **kwargs)
        with pytest.raises(StorageFault):
            asyncio.run(call(repo))

    def test_records_calls(self) -> None:
        repo = FlakyProductRepository()
        asyncio.run(repo.get(7))
        assert repo.calls == [("get", 7)]


class TestProductBuilder:
    def test_builder_is_immutable(self) -> None:
        base = ProductBuilder().named("Klozet")
        archived = base.archived()
        assert not base.build().is_archived
        assert archived.build().is_archived
        assert archived.build().name == "Klozet"

    def test_call_with_overrides(self) -> None:
        when = datetime(2026, 3, 1, tzinfo=UTC)
        p = ProductBuilder().created(when)(brand="Vitra")
        assert p.brand == "Vitra"
        assert p.created_date == when


class TestStrategies:
    @given(products())
    def test_products_are_valid(self, product: Product) -> None:
        assert product.name
        assert product.weight >= 0
        assert product.created_date.tzinfo is not None
