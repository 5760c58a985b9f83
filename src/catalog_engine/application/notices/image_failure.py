"""Application notices – one-shot image failure notice.

Owned by a single session or page. After ``threshold`` broken product
images the surface shows one notice, and stays quiet until :meth:`reset`.
"""
from __future__ import annotations

from catalog_engine.config.settings import CatalogSettings
from catalog_engine.kernel.errors import ValidationError


class ImageFailureNotice:
    def __init__(self, threshold: int = 3) -> None:
        if threshold < 1:
            raise ValidationError.for_field("threshold", "must be >= 1")
        self.threshold = threshold
        self.failures = 0
        self._shown = False

    @classmethod
    def from_settings(cls, settings: CatalogSettings) -> "ImageFailureNotice":
        return cls(threshold=settings.image_failure_threshold)

    @property
    def shown(self) -> bool:
        return self._shown

    def record_failure(self) -> bool:
        """Count one failure; True only on the call that crosses the threshold."""
        self.failures += 1
        if not self._shown and self.failures >= self.threshold:
            self._shown = True
            return True
        return False

    def reset(self) -> None:
        self.failures = 0
        self._shown = False


__all__ = ["ImageFailureNotice"]
