"""Repository ports – the storage collaborator contract of the catalog engine.

Concrete implementations live in ``adapters/memory`` and
``adapters/sqlalchemy``.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Generic, Sequence, TypeVar

if TYPE_CHECKING:
    from catalog_engine.domain.category import Category
    from catalog_engine.domain.product import Product

TRecord = TypeVar("TRecord")


class Repository(abc.ABC, Generic[TRecord]):
    """Port: generic async repository keyed by integer id."""

    @abc.abstractmethod
    async def fetch_all(self) -> Sequence[TRecord]:
        """Return a snapshot of every stored record."""

    @abc.abstractmethod
    async def get(self, id: int) -> TRecord | None: ...  # noqa: A002

    @abc.abstractmethod
    async def save(self, record: TRecord) -> TRecord:
        """Insert or update *record*; returns it with its id assigned."""


class ProductRepository(Repository["Product"]):
    """Port: product storage. ``delete`` is permanent."""

    @abc.abstractmethod
    async def delete(self, id: int) -> None: ...  # noqa: A002


class CategoryRepository(Repository["Category"]):
    """Port: category storage."""


__all__ = ["CategoryRepository", "ProductRepository", "Repository"]
