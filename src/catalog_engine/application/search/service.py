"""Application search – CatalogSearchService.

One request reads one storage snapshot and composes one predicate. That
predicate yields the total count over the full snapshot before any slicing,
and the same filtered sequence is then sorted and paged.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from catalog_engine.application.pagination import Page, PageRequest
from catalog_engine.application.search.criteria import Criteria
from catalog_engine.application.search.predicates import PredicateComposer
from catalog_engine.application.search.result import SearchResult
from catalog_engine.application.search.sorting import Sorter
from catalog_engine.config.settings import CatalogSettings
from catalog_engine.domain.product import Product
from catalog_engine.kernel.ddd.repository import ProductRepository
from catalog_engine.kernel.errors import BaseError, PersistenceError
from catalog_engine.observability.logging import get_logger

log = get_logger(__name__)


class CatalogSearchService:
    """Resolves :class:`Criteria` against a :class:`ProductRepository`."""

    def __init__(
        self,
        repository: ProductRepository,
        settings: CatalogSettings | None = None,
        composer: PredicateComposer | None = None,
        sorter: Sorter | None = None,
    ) -> None:
        self._repository = repository
        self._settings = settings or CatalogSettings()
        self._composer = composer or PredicateComposer()
        self._sorter = sorter or Sorter()

    async def search(self, criteria: Criteria) -> SearchResult:
        request = self._page_request(criteria)
        records = await self._snapshot()
        predicate = self._composer.compose(criteria)
        matched = predicate.select(records)
        ordered = self._sorter.sort(matched, criteria.sort_by, criteria.sort_direction)
        page = Page.of(ordered, request)
        log.info(
            "catalog.search",
            total=page.total,
            page=page.page,
            page_size=page.size,
            returned=len(page.items),
        )
        return SearchResult.from_page(page)

    async def search_params(self, params: Mapping[str, Any]) -> SearchResult:
        """Search with query-string style *params*; see :meth:`Criteria.from_mapping`."""
        criteria = Criteria.from_mapping(params, default_page_size=self._settings.default_page_size)
        return await self.search(criteria)

    async def count(self, criteria: Criteria) -> int:
        records = await self._snapshot()
        return self._composer.compose(criteria).count(records)

    async def _snapshot(self) -> Sequence[Product]:
        try:
            return await self._repository.fetch_all()
        except BaseError:
            raise
        except Exception as exc:
            log.exception("catalog.search_failed")
            raise PersistenceError("fetch_all", cause=exc) from exc

    def _page_request(self, criteria: Criteria) -> PageRequest:
        size = criteria.page_size
        if size > self._settings.max_page_size:
            log.warning(
                "catalog.page_size_capped",
                requested=size,
                max_page_size=self._settings.max_page_size,
            )
            size = self._settings.max_page_size
        return PageRequest(page=criteria.page, size=size, max_size=self._settings.max_page_size)


__all__ = ["CatalogSearchService"]
