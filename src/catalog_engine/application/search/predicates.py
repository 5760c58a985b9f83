"""Application search – PredicateComposer.

Builds one composite specification per :class:`Criteria`. Every leaf tests
a single product field; leaves are combined with ``AllOf`` / ``AnyOf`` /
``~``. A criterion that is absent contributes no node, so omitting it never
narrows the result.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Any, Iterable

from catalog_engine.application.search.criteria import Criteria, StatusScope
from catalog_engine.domain.barcodes import BARCODE_TYPE_FIELDS
from catalog_engine.domain.normalization import matches
from catalog_engine.domain.product import (
    IMAGE_FIELDS,
    MARKETPLACE_BARCODE_FIELDS,
    SEARCHABLE_TEXT_FIELDS,
    Product,
)
from catalog_engine.kernel.ddd.specification import AllOf, AnyOf, BaseSpecification
from catalog_engine.observability.logging import get_logger

log = get_logger(__name__)

ProductSpec = BaseSpecification[Product]


# ---------------------------------------------------------------------------
# Leaf specifications
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class ArchivedIs(BaseSpecification[Product]):
    archived: bool

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.is_archived is self.archived


@dataclasses.dataclass
class FieldMatchesToken(BaseSpecification[Product]):
    """Dual raw/normalized substring match of one search token."""

    field: str
    token: str

    def is_satisfied_by(self, candidate: Product) -> bool:
        return matches(getattr(candidate, self.field), self.token)


@dataclasses.dataclass
class FieldEquals(BaseSpecification[Product]):
    field: str
    value: Any

    def is_satisfied_by(self, candidate: Product) -> bool:
        actual = getattr(candidate, self.field)
        return actual is not None and actual == self.value


@dataclasses.dataclass
class FieldContains(BaseSpecification[Product]):
    field: str
    value: str

    def is_satisfied_by(self, candidate: Product) -> bool:
        actual = getattr(candidate, self.field)
        return bool(actual) and self.value in actual


@dataclasses.dataclass
class LinkedCategoryIs(BaseSpecification[Product]):
    name: str

    def is_satisfied_by(self, candidate: Product) -> bool:
        entity = candidate.category_entity
        return entity is not None and entity.name == self.name


@dataclasses.dataclass
class FieldAtLeast(BaseSpecification[Product]):
    field: str
    bound: Decimal | int

    def is_satisfied_by(self, candidate: Product) -> bool:
        return getattr(candidate, self.field) >= self.bound


@dataclasses.dataclass
class FieldAtMost(BaseSpecification[Product]):
    field: str
    bound: Decimal | int

    def is_satisfied_by(self, candidate: Product) -> bool:
        return getattr(candidate, self.field) <= self.bound


@dataclasses.dataclass
class FieldNotEmpty(BaseSpecification[Product]):
    field: str

    def is_satisfied_by(self, candidate: Product) -> bool:
        return bool(getattr(candidate, self.field))


def any_not_empty(fields: Iterable[str]) -> AnyOf[Product]:
    return AnyOf(*(FieldNotEmpty(f) for f in fields))


def presence(fields: Iterable[str], wanted: bool) -> ProductSpec:
    """``wanted=True``: some field is non-empty. ``False``: all are empty."""
    spec = any_not_empty(fields)
    return spec if wanted else ~spec


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------


class PredicateComposer:
    """Turns a :class:`Criteria` into a single product specification.

    Each ``*_spec`` method returns ``None`` when its criterion is absent;
    :meth:`compose` ANDs the rest together.
    """

    def __init__(self, searchable_fields: tuple[str, ...] = SEARCHABLE_TEXT_FIELDS) -> None:
        self._searchable_fields = searchable_fields

    def compose(self, criteria: Criteria) -> AllOf[Product]:
        parts = (
            self.status_spec(criteria.status),
            self.text_spec(criteria.search_text),
            self.category_spec(criteria.category),
            self.exact_spec("brand", criteria.brand),
            self.exact_spec("material", criteria.material),
            self.exact_spec("color", criteria.color),
            self.ean_code_spec(criteria.ean_code),
            self.range_spec("weight", criteria.min_weight, criteria.max_weight),
            self.range_spec("desi", criteria.min_desi, criteria.max_desi),
            self.range_spec("warranty_months", criteria.min_warranty, criteria.max_warranty),
            self.has_image_spec(criteria.has_image),
            self.has_ean_spec(criteria.has_ean),
            self.has_barcode_spec(criteria.has_barcode),
            self.barcode_type_spec(criteria.barcode_type),
        )
        return AllOf(*(p for p in parts if p is not None))

    def status_spec(self, status: str | None) -> ProductSpec | None:
        value = (status or "").strip().lower()
        if value == StatusScope.ALL.value:
            return None
        if value == StatusScope.ARCHIVED.value:
            return ArchivedIs(True)
        if value not in ("", StatusScope.ACTIVE.value):
            log.warning("search.unknown_status", status=status)
        return ArchivedIs(False)

    def text_spec(self, search_text: str | None) -> ProductSpec | None:
        tokens = (search_text or "").split()
        if not tokens:
            return None
        # each token may be satisfied by a different field
        return AllOf(
            *(AnyOf(*(FieldMatchesToken(f, token) for f in self._searchable_fields)) for token in tokens)
        )

    def category_spec(self, category: str | None) -> ProductSpec | None:
        if not _present(category):
            return None
        return AnyOf(FieldEquals("category", category), LinkedCategoryIs(category))  # type: ignore[arg-type]

    def exact_spec(self, field: str, value: str | None) -> ProductSpec | None:
        if not _present(value):
            return None
        return FieldEquals(field, value)

    def ean_code_spec(self, ean_code: str | None) -> ProductSpec | None:
        if not _present(ean_code):
            return None
        return FieldContains("ean_code", ean_code)  # type: ignore[arg-type]

    def range_spec(
        self,
        field: str,
        minimum: Decimal | int | None,
        maximum: Decimal | int | None,
    ) -> ProductSpec | None:
        bounds: list[ProductSpec] = []
        if minimum is not None:
            bounds.append(FieldAtLeast(field, minimum))
        if maximum is not None:
            bounds.append(FieldAtMost(field, maximum))
        return AllOf(*bounds) if bounds else None

    def has_image_spec(self, has_image: bool | None) -> ProductSpec | None:
        return None if has_image is None else presence(IMAGE_FIELDS, has_image)

    def has_ean_spec(self, has_ean: bool | None) -> ProductSpec | None:
        return None if has_ean is None else presence(("ean_code",), has_ean)

    def has_barcode_spec(self, has_barcode: bool | None) -> ProductSpec | None:
        return None if has_barcode is None else presence(MARKETPLACE_BARCODE_FIELDS, has_barcode)

    def barcode_type_spec(self, barcode_type: str | None) -> ProductSpec | None:
        if not _present(barcode_type):
            return None
        fields = BARCODE_TYPE_FIELDS.get(barcode_type.strip().lower())  # type: ignore[union-attr]
        if fields is None:
            log.warning("search.unknown_barcode_type", barcode_type=barcode_type)
            return None
        return any_not_empty(fields)


__all__ = [
    "ArchivedIs",
    "FieldAtLeast",
    "FieldAtMost",
    "FieldContains",
    "FieldEquals",
    "FieldMatchesToken",
    "FieldNotEmpty",
    "LinkedCategoryIs",
    "PredicateComposer",
    "any_not_empty",
    "presence",
]
