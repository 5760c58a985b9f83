"""Application bulk – request and result value objects."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Iterable

from catalog_engine.kernel.errors import ValidationError

MAX_BULK_IDS = 500


class BulkAction(str, Enum):
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: "BulkAction | str") -> "BulkAction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise ValidationError.for_field("action", f"unknown bulk action {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class BulkRequest:
    """A validated bulk mutation request.

    Raises :class:`ValidationError` for an unknown action, an empty id list
    or more than *max_ids* ids.
    """

    action: BulkAction
    product_ids: tuple[int, ...]

    @classmethod
    def of(
        cls,
        action: BulkAction | str,
        product_ids: Iterable[int],
        max_ids: int = MAX_BULK_IDS,
    ) -> "BulkRequest":
        ids = tuple(product_ids)
        if not ids:
            raise ValidationError.for_field("product_ids", "at least one id is required")
        if len(ids) > max_ids:
            raise ValidationError.for_field(
                "product_ids", f"at most {max_ids} ids per request, got {len(ids)}"
            )
        return cls(action=BulkAction.parse(action), product_ids=ids)

    @classmethod
    def from_mapping(cls, payload: dict[str, Any], max_ids: int = MAX_BULK_IDS) -> "BulkRequest":
        ids = payload.get("productIds", payload.get("product_ids")) or []
        try:
            parsed = [int(i) for i in ids]
        except (TypeError, ValueError) as exc:
            raise ValidationError.for_field("product_ids", "ids must be integers") from exc
        return cls.of(payload.get("action", ""), parsed, max_ids=max_ids)


@dataclasses.dataclass
class BulkResult:
    success_count: int = 0
    fail_count: int = 0
    failed_ids: list[int] = dataclasses.field(default_factory=list)

    @property
    def total(self) -> int:
        return self.success_count + self.fail_count

    def succeeded(self) -> None:
        self.success_count += 1

    def failed(self, product_id: int) -> None:
        self.fail_count += 1
        self.failed_ids.append(product_id)

    def to_dict(self) -> dict[str, int]:
        return {"successCount": self.success_count, "failCount": self.fail_count}


__all__ = ["BulkAction", "BulkRequest", "BulkResult", "MAX_BULK_IDS"]
