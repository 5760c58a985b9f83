"""Application categories – CategoryService."""
from __future__ import annotations

from catalog_engine.domain.category import Category
from catalog_engine.kernel.ddd.repository import CategoryRepository
from catalog_engine.kernel.errors import ConflictError, NotFoundError
from catalog_engine.kernel.time import Clock, SystemClock
from catalog_engine.observability.logging import get_logger

log = get_logger(__name__)


class CategoryService:
    """Category listing and lifecycle.

    Deactivating a category hides it from :meth:`list_active` only. Products
    that reference it keep their link and legacy name.
    """

    def __init__(self, repository: CategoryRepository, clock: Clock | None = None) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()

    async def list_active(self) -> list[Category]:
        categories = await self._repository.fetch_all()
        return sorted((c for c in categories if c.is_active), key=lambda c: c.name)

    async def list_all(self) -> list[Category]:
        return list(await self._repository.fetch_all())

    async def get_by_name(self, name: str) -> Category | None:
        for category in await self._repository.fetch_all():
            if category.name == name:
                return category
        return None

    async def create(self, name: str, description: str = "") -> Category:
        if await self.get_by_name(name) is not None:
            raise ConflictError(f"Category '{name}' already exists")
        category = await self._repository.save(Category(name=name, description=description))
        log.info("category.created", category_id=category.id, name=category.name)
        return category

    async def deactivate(self, category_id: int) -> Category:
        category = await self._require(category_id)
        category.deactivate(self._clock)
        return await self._repository.save(category)

    async def activate(self, category_id: int) -> Category:
        category = await self._require(category_id)
        category.activate(self._clock)
        return await self._repository.save(category)

    async def _require(self, category_id: int) -> Category:
        category = await self._repository.get(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return category


__all__ = ["CategoryService"]
