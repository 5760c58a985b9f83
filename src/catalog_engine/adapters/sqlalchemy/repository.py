"""SQLAlchemy adapter – product and category repositories.

Each repository method runs in its own session; ``save`` and ``delete``
commit before returning.
"""
from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_engine.adapters.sqlalchemy.models import CategoryRecord, ProductRecord
from catalog_engine.domain.category import Category
from catalog_engine.domain.product import Product
from catalog_engine.kernel.ddd.repository import CategoryRepository, ProductRepository
from catalog_engine.kernel.errors import NotFoundError, PersistenceError

SessionFactory = Callable[[], AsyncSession]

_PRODUCT_COLUMNS = tuple(
    f.name for f in dataclasses.fields(Product) if f.name not in ("id", "category_entity")
)
_CATEGORY_COLUMNS = ("name", "description", "is_active", "created_date", "updated_date")


def _aware(value: datetime | None) -> datetime | None:
    # SQLite drops the offset; stored values are always UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def category_to_domain(row: CategoryRecord) -> Category:
    return Category(
        id=row.id,
        name=row.name,
        description=row.description,
        is_active=row.is_active,
        created_date=_aware(row.created_date),  # type: ignore[arg-type]
        updated_date=_aware(row.updated_date) or _aware(row.created_date),  # type: ignore[arg-type]
    )


def product_to_domain(row: ProductRecord) -> Product:
    values: dict[str, Any] = {name: getattr(row, name) for name in _PRODUCT_COLUMNS}
    values["created_date"] = _aware(row.created_date)
    values["updated_date"] = _aware(row.updated_date)
    entity = row.category_entity
    return Product(
        id=row.id,
        category_entity=category_to_domain(entity) if entity is not None else None,
        **values,
    )


class SqlAlchemyProductRepository(ProductRepository):
    def __init__(self, sessions: SessionFactory) -> None:
        self._sessions = sessions

    async def fetch_all(self) -> list[Product]:
        async with self._sessions() as session:
            result = await session.execute(
                select(ProductRecord).options(selectinload(ProductRecord.category_entity))
            )
            return [product_to_domain(row) for row in result.scalars().all()]

    async def get(self, id: int) -> Product | None:  # noqa: A002
        async with self._sessions() as session:
            row = await session.get(
                ProductRecord, id, options=[selectinload(ProductRecord.category_entity)]
            )
            return product_to_domain(row) if row is not None else None

    async def save(self, record: Product) -> Product:
        async with self._sessions() as session:
            row = await session.get(ProductRecord, record.id) if record.id is not None else None
            if row is None:
                row = ProductRecord(id=record.id)
                session.add(row)
            for name in _PRODUCT_COLUMNS:
                setattr(row, name, getattr(record, name))
            try:
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise PersistenceError("save", cause=exc) from exc
            return dataclasses.replace(record, id=row.id)

    async def delete(self, id: int) -> None:  # noqa: A002
        async with self._sessions() as session:
            row = await session.get(ProductRecord, id)
            if row is None:
                raise NotFoundError("Product", id)
            await session.delete(row)
            try:
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise PersistenceError("delete", cause=exc) from exc


class SqlAlchemyCategoryRepository(CategoryRepository):
    def __init__(self, sessions: SessionFactory) -> None:
        self._sessions = sessions

    async def fetch_all(self) -> list[Category]:
        async with self._sessions() as session:
            result = await session.execute(select(CategoryRecord))
            return [category_to_domain(row) for row in result.scalars().all()]

    async def get(self, id: int) -> Category | None:  # noqa: A002
        async with self._sessions() as session:
            row = await session.get(CategoryRecord, id)
            return category_to_domain(row) if row is not None else None

    async def save(self, record: Category) -> Category:
        async with self._sessions() as session:
            row = await session.get(CategoryRecord, record.id) if record.id is not None else None
            if row is None:
                row = CategoryRecord(id=record.id)
                session.add(row)
            for name in _CATEGORY_COLUMNS:
                setattr(row, name, getattr(record, name))
            try:
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise PersistenceError("save", cause=exc) from exc
            return dataclasses.replace(record, id=row.id)


__all__ = [
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
    "category_to_domain",
    "product_to_domain",
]
