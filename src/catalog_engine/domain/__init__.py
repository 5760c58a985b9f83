"""Catalog domain – records, text folding and barcode registries."""
from catalog_engine.domain.barcodes import (
    BARCODE_TYPE_FIELDS,
    barcode_at,
    format_barcode_list,
    is_valid_logo_barcode,
    parse_barcode_list,
)
from catalog_engine.domain.category import Category
from catalog_engine.domain.normalization import matches, normalize
from catalog_engine.domain.product import (
    IMAGE_FIELDS,
    MARKETPLACE_BARCODE_FIELDS,
    SEARCHABLE_TEXT_FIELDS,
    Product,
)

__all__ = [
    "BARCODE_TYPE_FIELDS",
    "Category",
    "IMAGE_FIELDS",
    "MARKETPLACE_BARCODE_FIELDS",
    "Product",
    "SEARCHABLE_TEXT_FIELDS",
    "barcode_at",
    "format_barcode_list",
    "is_valid_logo_barcode",
    "matches",
    "normalize",
    "parse_barcode_list",
]
