"""Shared catalog fixtures for application tests."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from catalog_engine.adapters.memory import InMemoryProductRepository
from catalog_engine.domain import Product
from catalog_engine.kernel.time import FrozenClock

T1 = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)
T2 = datetime(2026, 1, 2, 9, 0, tzinfo=UTC)
T3 = datetime(2026, 1, 3, 9, 0, tzinfo=UTC)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 2, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def klozet_catalog() -> InMemoryProductRepository:
    """Klozet A (t1), Klozet B (t2) and Lavabo C (t3) with ids 1, 2, 3."""
    return InMemoryProductRepository(
        [
            Product(id=1, name="Klozet A", brand="Vitra", created_date=T1),
            Product(id=2, name="Klozet B", brand="Eca", created_date=T2),
            Product(id=3, name="Lavabo C", brand="Vitra", created_date=T3),
        ]
    )
