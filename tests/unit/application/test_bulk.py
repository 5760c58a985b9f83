"""Unit tests for bulk archive/unarchive/delete."""
from __future__ import annotations

import asyncio
import dataclasses

import pytest
from structlog.testing import capture_logs

from catalog_engine.adapters.memory import InMemoryProductRepository
from catalog_engine.application.bulk import BulkAction, BulkMutator, BulkRequest, BulkResult
from catalog_engine.config.settings import CatalogSettings
from catalog_engine.domain import Product
from catalog_engine.kernel.errors import PersistenceError, ValidationError
from catalog_engine.kernel.time import FrozenClock
from catalog_engine.testing import FlakyProductRepository


def _catalog(cls: type[InMemoryProductRepository] = InMemoryProductRepository, **kwargs: object) -> InMemoryProductRepository:
    return cls(  # type: ignore[call-arg]
        [
            Product(id=1, name="Klozet A", brand="Vitra"),
            Product(id=2, name="Klozet B", is_archived=True),
            Product(id=3, name="Lavabo C"),
        ],
        **kwargs,
    )


class TestBulkRequest:
    def test_valid(self) -> None:
        req = BulkRequest.of("archive", [1, 2])
        assert req.action is BulkAction.ARCHIVE
        assert req.product_ids == (1, 2)

    def test_empty_ids_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BulkRequest.of("archive", [])

    def test_too_many_ids_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BulkRequest.of("archive", range(501))

    def test_exactly_max_ids_allowed(self) -> None:
        assert len(BulkRequest.of("delete", range(500)).product_ids) == 500

    def test_unknown_action_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BulkRequest.of("purge", [1])

    def test_action_is_case_insensitive(self) -> None:
        assert BulkRequest.of(" UnArchive ", [1]).action is BulkAction.UNARCHIVE

    def test_from_mapping(self) -> None:
        req = BulkRequest.from_mapping({"action": "delete", "productIds": ["4", 5]})
        assert req.product_ids == (4, 5)

    def test_from_mapping_rejects_non_integer_ids(self) -> None:
        with pytest.raises(ValidationError):
            BulkRequest.from_mapping({"action": "delete", "productIds": ["x"]})


class TestBulkResult:
    def test_counts(self) -> None:
        result = BulkResult()
        result.succeeded()
        result.failed(9)
        assert (result.success_count, result.fail_count, result.total) == (1, 1, 2)
        assert result.failed_ids == [9]
        assert result.to_dict() == {"successCount": 1, "failCount": 1}


class TestArchive:
    def test_missing_id_counts_as_failure(self, clock: FrozenClock) -> None:
        repo = _catalog()

        async def run() -> tuple[BulkResult, Product | None]:
            before = await repo.get(1)
            result = await BulkMutator(repo, clock).apply(BulkAction.ARCHIVE, [1, 9999999])
            after = await repo.get(1)
            assert before is not None and after is not None
            changed = {
                f.name
                for f in dataclasses.fields(Product)
                if getattr(before, f.name) != getattr(after, f.name)
            }
            assert changed == {"is_archived", "updated_date"}
            return result, after

        result, product = asyncio.run(run())
        assert (result.success_count, result.fail_count) == (1, 1)
        assert result.failed_ids == [9999999]
        assert product is not None and product.is_archived
        assert product.updated_date == clock.now()

    def test_already_archived_fails(self, clock: FrozenClock) -> None:
        result = asyncio.run(BulkMutator(_catalog(), clock).apply("archive", [2, 3]))
        assert (result.success_count, result.fail_count, result.failed_ids) == (1, 1, [2])

    def test_duplicate_ids_are_processed_independently(self, clock: FrozenClock) -> None:
        result = asyncio.run(BulkMutator(_catalog(), clock).apply("archive", [1, 1]))
        assert (result.success_count, result.fail_count) == (1, 1)


class TestUnarchive:
    def test_only_archived_records_succeed(self, clock: FrozenClock) -> None:
        repo = _catalog()
        result = asyncio.run(BulkMutator(repo, clock).apply("unarchive", [1, 2]))
        assert (result.success_count, result.fail_count, result.failed_ids) == (1, 1, [1])
        restored = asyncio.run(repo.get(2))
        assert restored is not None and not restored.is_archived


class TestDelete:
    def test_delete_removes_records(self, clock: FrozenClock) -> None:
        repo = _catalog()
        result = asyncio.run(BulkMutator(repo, clock).apply("delete", [1, 2, 42]))
        assert (result.success_count, result.fail_count) == (2, 1)
        assert [p.id for p in asyncio.run(repo.fetch_all())] == [3]


class TestStorageFaults:
    def test_fault_on_one_id_does_not_abort_batch(self, clock: FrozenClock) -> None:
        repo = _catalog(FlakyProductRepository, fail_on_save={1})
        result = asyncio.run(BulkMutator(repo, clock).apply("archive", [1, 3]))
        assert (result.success_count, result.fail_count, result.failed_ids) == (1, 1, [1])
        third = asyncio.run(repo.get(3))
        assert third is not None and third.is_archived

    def test_fault_on_read_is_counted(self, clock: FrozenClock) -> None:
        repo = _catalog(FlakyProductRepository, fail_on_get={3})
        result = asyncio.run(BulkMutator(repo, clock).apply("delete", [3, 1]))
        assert (result.success_count, result.fail_count) == (1, 1)

    def test_fault_is_logged_with_id(self, clock: FrozenClock) -> None:
        repo = _catalog(FlakyProductRepository, fail_on_delete={1})
        with capture_logs() as logs:
            asyncio.run(BulkMutator(repo, clock).apply("delete", [1]))
        failures = [e for e in logs if e["event"] == "bulk.item_failed"]
        assert failures and failures[0]["product_id"] == 1

    def test_catalog_error_context_is_logged(self, clock: FrozenClock) -> None:
        repo = _catalog(FlakyProductRepository, fail_on_save={1}, error_factory=PersistenceError)
        with capture_logs() as logs:
            result = asyncio.run(BulkMutator(repo, clock).apply("archive", [1]))
        assert result.failed_ids == [1]
        failure = next(e for e in logs if e["event"] == "bulk.item_failed")
        assert failure["error_code"] == "persistence_error"
        assert failure["operation"] == "save 1 failed"


class TestAudit:
    def test_one_audit_line_per_batch(self, clock: FrozenClock) -> None:
        with capture_logs() as logs:
            asyncio.run(BulkMutator(_catalog(), clock).apply("archive", [1, 2, 3]))
        audit = [e for e in logs if e["event"] == "audit.bulk_archive"]
        assert len(audit) == 1
        assert audit[0]["outcome"] == "partial"
        assert (audit[0]["requested"], audit[0]["succeeded"], audit[0]["failed"]) == (3, 2, 1)

    def test_settings_bound_batch_size(self, clock: FrozenClock) -> None:
        mutator = BulkMutator(_catalog(), clock, CatalogSettings(max_bulk_ids=2))
        with pytest.raises(ValidationError):
            asyncio.run(mutator.apply("archive", [1, 2, 3]))
