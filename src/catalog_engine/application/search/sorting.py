"""Application search – Sorter.

Every ordering is a three-level chain: the requested key, then
``created_date``, then ``id``, all in the requested direction. The chain is a
strict total order, so page boundaries stay stable across requests.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Iterable

from catalog_engine.application.search.criteria import SortDirection, SortKey
from catalog_engine.domain.product import Product

_ZERO = Decimal("0")


def _text(field: str) -> Callable[[Product], Any]:
    return lambda p: getattr(p, field) or ""


def _number(field: str) -> Callable[[Product], Any]:
    return lambda p: getattr(p, field) or _ZERO


_PRIMARY: dict[str, Callable[[Product], Any]] = {
    SortKey.NAME.value: _text("name"),
    SortKey.BRAND.value: _text("brand"),
    SortKey.CATEGORY.value: _text("category"),
    SortKey.SKU.value: _text("sku"),
    SortKey.WEIGHT.value: _number("weight"),
    SortKey.DESI.value: _number("desi"),
    SortKey.WARRANTY.value: _number("warranty_months"),
    SortKey.CREATED.value: lambda p: p.created_date,
    SortKey.UPDATED.value: lambda p: p.last_modified,
}


class Sorter:
    """Deterministic multi-key product ordering."""

    default_key = SortKey.UPDATED.value
    default_direction = SortDirection.DESC.value
    fallback_key = SortKey.NAME.value

    def resolve(self, sort_key: str | None, direction: str | None) -> tuple[str, bool]:
        """Return ``(key, descending)`` after applying defaults and fallbacks.

        An empty key means the default (``updated`` descending). A key that is
        not recognised falls back to ``name`` ascending.
        """
        key = (sort_key or "").strip().lower()
        if not key:
            return self.default_key, _is_desc(direction or self.default_direction)
        if key not in _PRIMARY:
            return self.fallback_key, False
        return key, _is_desc(direction)

    def key_for(self, sort_key: str) -> Callable[[Product], tuple[Any, ...]]:
        primary = _PRIMARY[sort_key]
        return lambda p: (primary(p), p.created_date, p.id or 0)

    def compare(self, a: Product, b: Product, sort_key: str | None, direction: str | None) -> int:
        key, descending = self.resolve(sort_key, direction)
        ka, kb = self.key_for(key)(a), self.key_for(key)(b)
        result = (ka > kb) - (ka < kb)
        return -result if descending else result

    def sort(
        self,
        items: Iterable[Product],
        sort_key: str | None = None,
        direction: str | None = None,
    ) -> list[Product]:
        key, descending = self.resolve(sort_key, direction)
        return sorted(items, key=self.key_for(key), reverse=descending)


def _is_desc(direction: str | None) -> bool:
    return (direction or "").strip().lower() == SortDirection.DESC.value


__all__ = ["Sorter"]
