"""Category record."""
from __future__ import annotations

import dataclasses
from datetime import datetime

from catalog_engine.kernel.errors import ValidationError
from catalog_engine.kernel.time import Clock, utc_now


@dataclasses.dataclass
class Category:
    """Named product category.

    Inactive categories are hidden from default listings; products that
    reference them are left untouched.
    """

    name: str
    id: int | None = None
    is_active: bool = True
    description: str = ""
    created_date: datetime = dataclasses.field(default_factory=utc_now)
    updated_date: datetime = dataclasses.field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError.for_field("name", "category name is required")
        if len(self.name) > 100:
            raise ValidationError.for_field("name", "category name exceeds 100 characters")

    def deactivate(self, clock: Clock) -> None:
        self.is_active = False
        self.updated_date = clock.now()

    def activate(self, clock: Clock) -> None:
        self.is_active = True
        self.updated_date = clock.now()


__all__ = ["Category"]
