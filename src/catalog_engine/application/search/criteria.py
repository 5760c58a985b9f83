"""Application search – Criteria value object.

Criteria carries every caller-supplied filter, sort and paging parameter of
one catalog query. Blank strings and ``None`` mean "no constraint".
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping

from catalog_engine.application.pagination.page_request import DEFAULT_PAGE_SIZE
from catalog_engine.kernel.errors import ValidationError


class StatusScope(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"
    ALL = "all"


class SortKey(str, Enum):
    NAME = "name"
    BRAND = "brand"
    CATEGORY = "category"
    SKU = "sku"
    WEIGHT = "weight"
    DESI = "desi"
    WARRANTY = "warranty"
    CREATED = "created"
    UPDATED = "updated"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Criteria:
    search_text: str = ""
    category: str = ""
    brand: str = ""
    status: str = ""
    material: str = ""
    color: str = ""
    ean_code: str = ""
    min_weight: Decimal | None = None
    max_weight: Decimal | None = None
    min_desi: Decimal | None = None
    max_desi: Decimal | None = None
    min_warranty: int | None = None
    max_warranty: int | None = None
    sort_by: str = SortKey.UPDATED.value
    sort_direction: str = SortDirection.DESC.value
    has_image: bool | None = None
    has_ean: bool | None = None
    has_barcode: bool | None = None
    barcode_type: str = ""
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError.for_field("page", "must be >= 1")
        if self.page_size < 1:
            raise ValidationError.for_field("page_size", "must be >= 1")

    def with_page(self, page: int, page_size: int | None = None) -> "Criteria":
        return dataclasses.replace(
            self, page=page, page_size=self.page_size if page_size is None else page_size
        )

    @classmethod
    def from_mapping(
        cls,
        params: Mapping[str, Any],
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> "Criteria":
        """Build Criteria from query-string style values.

        Accepts snake_case field names and the camelCase names used by the
        web listing (``search``, ``sortBy``, ``hasImage`` ...). A missing or
        blank page size becomes *default_page_size*.
        """
        values: dict[str, Any] = {"page_size": default_page_size}
        for raw_key, raw_value in params.items():
            key = _ALIASES.get(raw_key, raw_key)
            if key not in _FIELD_NAMES:
                continue
            value = _PARSERS.get(key, _parse_text)(key, raw_value)
            if value is not None:
                values[key] = value
        return cls(**values)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(Criteria))

_ALIASES: dict[str, str] = {
    "search": "search_text",
    "searchText": "search_text",
    "q": "search_text",
    "eanCode": "ean_code",
    "minWeight": "min_weight",
    "maxWeight": "max_weight",
    "minDesi": "min_desi",
    "maxDesi": "max_desi",
    "minWarranty": "min_warranty",
    "maxWarranty": "max_warranty",
    "sortBy": "sort_by",
    "sortDirection": "sort_direction",
    "hasImage": "has_image",
    "hasEan": "has_ean",
    "hasBarcode": "has_barcode",
    "barcodeType": "barcode_type",
    "pageSize": "page_size",
}

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_text(key: str, value: Any) -> str | None:  # noqa: ARG001
    if _blank(value):
        return None
    return str(value).strip()


def _parse_decimal(key: str, value: Any) -> Decimal | None:
    if _blank(value):
        return None
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError.for_field(key, f"not a number: {value!r}") from exc


def _parse_int(key: str, value: Any) -> int | None:
    if _blank(value):
        return None
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError.for_field(key, f"not an integer: {value!r}") from exc


def _parse_flag(key: str, value: Any) -> bool | None:
    if _blank(value):
        return None
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValidationError.for_field(key, f"expected true/false, got {value!r}")


_PARSERS = {
    "min_weight": _parse_decimal,
    "max_weight": _parse_decimal,
    "min_desi": _parse_decimal,
    "max_desi": _parse_decimal,
    "min_warranty": _parse_int,
    "max_warranty": _parse_int,
    "page": _parse_int,
    "page_size": _parse_int,
    "has_image": _parse_flag,
    "has_ean": _parse_flag,
    "has_barcode": _parse_flag,
}


__all__ = ["Criteria", "SortDirection", "SortKey", "StatusScope"]
