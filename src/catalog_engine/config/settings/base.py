"""Config settings – Settings base class and the engine's settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from catalog_engine.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class CatalogSettings(Settings):
    """Tunables of the search, bulk and suggestion operations.

    Read from ``CATALOG_*`` environment variables, e.g.
    ``CATALOG_MAX_PAGE_SIZE=100``.
    """

    _prefix: ClassVar[str] = "CATALOG"

    default_page_size: int = 50
    max_page_size: int = 200
    max_bulk_ids: int = 500
    suggestion_min_length: int = 2
    suggestion_limit: int = 8
    suggestion_scan_size: int = 10
    image_failure_threshold: int = 3
    log_level: str = "INFO"
    database_url: str = "sqlite+aiosqlite:///catalog.db"

    def _validate(self) -> None:
        for name in (
            "default_page_size",
            "max_page_size",
            "max_bulk_ids",
            "suggestion_min_length",
            "suggestion_limit",
            "suggestion_scan_size",
            "image_failure_threshold",
        ):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise InvalidSettingValueError(name, value, "must be a positive integer")
        if self.default_page_size > self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must not exceed max_page_size"
            )


__all__ = ["CatalogSettings", "Settings"]
