"""Unit tests for the error hierarchy."""
from __future__ import annotations

import json

import pytest

from catalog_engine.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("boom").code == "catalog_error"

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="x", detail={"a": 1})
        assert err.to_dict() == {"code": "x", "message": "boom", "detail": {"a": 1}}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("disk")
        err = BaseError("boom", cause=cause)
        assert err.__cause__ is cause
        assert "RuntimeError" in err.to_dict()["cause"]

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload["message"] == "boom"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls, parent",
        [
            (ValidationError, DomainError),
            (NotFoundError, DomainError),
            (ConflictError, DomainError),
            (PersistenceError, InfrastructureError),
            (DomainError, BaseError),
            (ApplicationError, BaseError),
            (InfrastructureError, BaseError),
        ],
    )
    def test_subclassing(self, cls: type, parent: type) -> None:
        assert issubclass(cls, parent)


class TestValidationError:
    def test_for_field(self) -> None:
        err = ValidationError.for_field("page", "must be >= 1")
        assert err.errors == [{"field": "page", "message": "must be >= 1"}]
        assert err.code == "validation_error"
        assert err.to_dict()["errors"] == err.errors


class TestNotFoundError:
    def test_message_includes_identifier(self) -> None:
        err = NotFoundError("Product", 42)
        assert err.message == "Product '42' not found"
        assert err.resource == "Product"
        assert err.identifier == 42

    def test_message_without_identifier(self) -> None:
        assert NotFoundError("Product").message == "Product not found"


class TestPersistenceError:
    def test_default_message(self) -> None:
        err = PersistenceError("fetch_all")
        assert err.operation == "fetch_all"
        assert "fetch_all" in err.message
        assert err.code == "persistence_error"


class TestDetail:
    def test_not_found_identifies_the_record(self) -> None:
        err = NotFoundError("Product", 42)
        assert err.detail == {"resource": "Product", "identifier": 42}

    def test_persistence_error_names_the_operation(self) -> None:
        err = PersistenceError("save", detail={"table": "products"})
        assert err.detail == {"operation": "save", "table": "products"}

    def test_log_context_is_flat(self) -> None:
        assert NotFoundError("Category", 7).log_context() == {
            "error_code": "not_found",
            "resource": "Category",
            "identifier": 7,
        }

    def test_detail_is_copied(self) -> None:
        source = {"a": 1}
        err = BaseError("boom", detail=source)
        err.detail["b"] = 2
        assert source == {"a": 1}
