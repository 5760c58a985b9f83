"""Application bulk – BulkMutator.

Applies archive, unarchive or delete to many products. Every id is handled
on its own with its own commit: a missing record, a record already in the
target state, or a storage fault counts as one failure and the batch moves
on. The batch is not atomic.
"""
from __future__ import annotations

from typing import Iterable

from catalog_engine.application.bulk.models import BulkAction, BulkRequest, BulkResult
from catalog_engine.config.settings import CatalogSettings
from catalog_engine.kernel.ddd.repository import ProductRepository
from catalog_engine.kernel.errors import BaseError
from catalog_engine.kernel.time import Clock, SystemClock
from catalog_engine.observability.logging import AuditLogger, AuditOutcome, get_logger

log = get_logger(__name__)


class BulkMutator:
    def __init__(
        self,
        repository: ProductRepository,
        clock: Clock | None = None,
        settings: CatalogSettings | None = None,
        audit: AuditLogger | None = None,
    ) -> None:
        self._repository = repository
        self._clock = clock or SystemClock()
        self._settings = settings or CatalogSettings()
        self._audit = audit or AuditLogger()

    async def apply(self, action: BulkAction | str, ids: Iterable[int]) -> BulkResult:
        """Validate and run one bulk mutation; see :meth:`execute`."""
        request = BulkRequest.of(action, ids, max_ids=self._settings.max_bulk_ids)
        return await self.execute(request)

    async def execute(self, request: BulkRequest) -> BulkResult:
        result = BulkResult()
        for product_id in request.product_ids:
            try:
                applied = await self._apply_one(request.action, product_id)
            except Exception as exc:
                context = exc.log_context() if isinstance(exc, BaseError) else {}
                log.exception(
                    "bulk.item_failed", action=request.action.value, product_id=product_id, **context
                )
                applied = False
            if applied:
                result.succeeded()
            else:
                result.failed(product_id)

        self._audit.record(
            f"bulk_{request.action.value}",
            "product",
            _outcome(result),
            requested=len(request.product_ids),
            succeeded=result.success_count,
            failed=result.fail_count,
            failed_ids=result.failed_ids,
        )
        return result

    async def _apply_one(self, action: BulkAction, product_id: int) -> bool:
        product = await self._repository.get(product_id)
        if product is None:
            log.info("bulk.item_missing", action=action.value, product_id=product_id)
            return False

        if action is BulkAction.DELETE:
            await self._repository.delete(product_id)
            return True

        target = action is BulkAction.ARCHIVE
        if product.is_archived is target:
            log.info("bulk.item_unchanged", action=action.value, product_id=product_id)
            return False
        if target:
            product.archive(self._clock)
        else:
            product.unarchive(self._clock)
        await self._repository.save(product)
        return True


def _outcome(result: BulkResult) -> AuditOutcome:
    if result.fail_count == 0:
        return AuditOutcome.SUCCESS
    if result.success_count == 0:
        return AuditOutcome.FAILURE
    return AuditOutcome.PARTIAL


__all__ = ["BulkMutator"]
