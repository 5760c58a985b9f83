"""Barcode registries and the legacy logo-barcode list codec.

``logo_barcodes`` has been stored in three historical formats: comma
separated (current), a JSON array, and newline separated. The parser tries
them in exactly that order.
"""
from __future__ import annotations

import json
import re

from catalog_engine.domain.product import MARKETPLACE_BARCODE_FIELDS

ANY_BARCODE_TAG = "any"

BARCODE_TYPE_FIELDS: dict[str, tuple[str, ...]] = {
    "trendyol": ("trendyol_barcode",),
    "hepsiburada": ("hepsiburada_barcode",),
    "hepsiburada_seller": ("hepsiburada_seller_stock_code",),
    "hepsiburada_tedarik": ("hepsiburada_tedarik_barcode",),
    "amazon": ("amazon_barcode",),
    "koctas": ("koctas_barcode",),
    "koctas_istanbul": ("koctas_istanbul_barcode",),
    "n11": ("n11_product_code", "n11_catalog_id"),
    "n11_catalog": ("n11_catalog_id",),
    "n11_product": ("n11_product_code",),
    "pazarama": ("pazarama_barcode",),
    "pttavm": ("pttavm_barcode",),
    "haceyapi": ("haceyapi_barcode",),
    "spare1": ("spare_barcode1",),
    "spare2": ("spare_barcode2",),
    "spare3": ("spare_barcode3",),
    "spare4": ("spare_barcode4",),
    "logo": ("logo_barcodes",),
    "koctas_ean": ("koctas_ean_barcode",),
    "koctas_ean_istanbul": ("koctas_ean_istanbul_barcode",),
    "ptt_urun_stok": ("ptt_urun_stok_kodu",),
    ANY_BARCODE_TAG: MARKETPLACE_BARCODE_FIELDS,
}

_LOGO_BARCODE_RE = re.compile(r"^[0-9]+(\.[0-9]+)*$")
_NEWLINES_RE = re.compile(r"[\r\n]")


def parse_barcode_list(raw: str | None) -> list[str]:
    """Decode a stored barcode list; malformed input yields ``[]``."""
    if not raw or not raw.strip():
        return []
    if "," in raw:
        return [item.strip() for item in raw.split(",") if item.strip()]
    if raw.strip().startswith("["):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            return []
        if not isinstance(decoded, list):
            return []
        return [str(item).strip() for item in decoded if item is not None and str(item).strip()]
    return [line.strip() for line in _NEWLINES_RE.split(raw) if line.strip()]


def format_barcode_list(items: list[str]) -> str:
    """Encode barcodes in the canonical comma-separated form."""
    return ",".join(item.strip() for item in items if item and item.strip())


def barcode_at(raw: str | None, index: int) -> str:
    items = parse_barcode_list(raw)
    return items[index] if 0 <= index < len(items) else ""


def is_valid_logo_barcode(text: str | None) -> bool:
    """Dotted numeric groups, e.g. ``153.12.312.17``."""
    if not text or not text.strip():
        return False
    return bool(_LOGO_BARCODE_RE.match(text.strip()))


__all__ = [
    "ANY_BARCODE_TAG",
    "BARCODE_TYPE_FIELDS",
    "barcode_at",
    "format_barcode_list",
    "is_valid_logo_barcode",
    "parse_barcode_list",
]
