"""Product record – the searched entity of the catalog."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from catalog_engine.domain.category import Category
from catalog_engine.kernel.errors import ConflictError, ValidationError
from catalog_engine.kernel.time import Clock, utc_now

IMAGE_FIELDS: tuple[str, ...] = (
    "image_url",
    "image_url1",
    "image_url2",
    "image_url3",
    "image_url4",
    "image_url5",
)

MARKETPLACE_BARCODE_FIELDS: tuple[str, ...] = (
    "trendyol_barcode",
    "hepsiburada_barcode",
    "hepsiburada_seller_stock_code",
    "hepsiburada_tedarik_barcode",
    "amazon_barcode",
    "koctas_barcode",
    "koctas_istanbul_barcode",
    "n11_product_code",
    "n11_catalog_id",
    "pazarama_barcode",
    "pttavm_barcode",
    "haceyapi_barcode",
    "spare_barcode1",
    "spare_barcode2",
    "spare_barcode3",
    "spare_barcode4",
    "logo_barcodes",
    "koctas_ean_barcode",
    "koctas_ean_istanbul_barcode",
    "ptt_urun_stok_kodu",
)

SEARCHABLE_TEXT_FIELDS: tuple[str, ...] = (
    "name",
    "sku",
    "brand",
    "ean_code",
    "description",
    "features",
    "material",
    "color",
    "notes",
    "category",
    *MARKETPLACE_BARCODE_FIELDS,
)

_DECIMAL_FIELDS = ("weight", "desi", "width", "height", "depth")


def _to_decimal(name: str, value: Any) -> Decimal:
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError.for_field(name, f"not a number: {value!r}") from exc
    if result < 0:
        raise ValidationError.for_field(name, "must be non-negative")
    return result


@dataclasses.dataclass
class Product:
    """A catalog product.

    ``category`` is the legacy free-text category name; ``category_entity``
    is the linked :class:`Category`. When both are set they name the same
    category.
    """

    name: str
    id: int | None = None
    sku: str = ""
    brand: str = ""
    category: str = ""
    ean_code: str = ""

    description: str = ""
    features: str = ""
    notes: str = ""
    material: str = ""
    color: str = ""

    weight: Decimal = Decimal("0")
    desi: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    height: Decimal = Decimal("0")
    depth: Decimal = Decimal("0")
    warranty_months: int = 0

    image_url: str = ""
    image_url1: str = ""
    image_url2: str = ""
    image_url3: str = ""
    image_url4: str = ""
    image_url5: str = ""

    trendyol_barcode: str = ""
    hepsiburada_barcode: str = ""
    hepsiburada_seller_stock_code: str = ""
    hepsiburada_tedarik_barcode: str = ""
    amazon_barcode: str = ""
    koctas_barcode: str = ""
    koctas_istanbul_barcode: str = ""
    n11_product_code: str = ""
    n11_catalog_id: str = ""
    pazarama_barcode: str = ""
    pttavm_barcode: str = ""
    haceyapi_barcode: str = ""
    spare_barcode1: str = ""
    spare_barcode2: str = ""
    spare_barcode3: str = ""
    spare_barcode4: str = ""
    logo_barcodes: str = ""
    koctas_ean_barcode: str = ""
    koctas_ean_istanbul_barcode: str = ""
    ptt_urun_stok_kodu: str = ""

    is_archived: bool = False
    created_date: datetime = dataclasses.field(default_factory=utc_now)
    updated_date: datetime | None = None

    category_id: int | None = None
    category_entity: Category | None = None

    def __post_init__(self) -> None:
        for name in _DECIMAL_FIELDS:
            setattr(self, name, _to_decimal(name, getattr(self, name)))
        if self.warranty_months is None or int(self.warranty_months) < 0:
            raise ValidationError.for_field("warranty_months", "must be non-negative")
        self.warranty_months = int(self.warranty_months)
        if self.category_entity is not None:
            if self.category_id is None:
                self.category_id = self.category_entity.id
            if not self.category:
                self.category = self.category_entity.name

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def category_entity_name(self) -> str:
        return self.category_entity.name if self.category_entity is not None else ""

    @property
    def last_modified(self) -> datetime:
        """``updated_date`` or, for never-edited records, ``created_date``."""
        return self.updated_date or self.created_date

    def image_urls(self) -> list[str]:
        return [v for v in (getattr(self, f) for f in IMAGE_FIELDS) if v]

    def barcode_values(self) -> dict[str, str]:
        return {f: v for f in MARKETPLACE_BARCODE_FIELDS if (v := getattr(self, f))}

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def touch(self, clock: Clock) -> None:
        self.updated_date = clock.now()

    def archive(self, clock: Clock) -> None:
        if self.is_archived:
            raise ConflictError(f"Product '{self.id}' is already archived")
        self.is_archived = True
        self.touch(clock)

    def unarchive(self, clock: Clock) -> None:
        if not self.is_archived:
            raise ConflictError(f"Product '{self.id}' is not archived")
        self.is_archived = False
        self.touch(clock)

    def copy(self) -> "Product":
        return dataclasses.replace(self)


__all__ = [
    "IMAGE_FIELDS",
    "MARKETPLACE_BARCODE_FIELDS",
    "Product",
    "SEARCHABLE_TEXT_FIELDS",
]
