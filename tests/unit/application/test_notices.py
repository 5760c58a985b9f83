"""Unit tests for the one-shot image failure notice."""
from __future__ import annotations

import pytest

from catalog_engine.application.notices import ImageFailureNotice
from catalog_engine.kernel.errors import ValidationError


class TestImageFailureNotice:
    def test_triggers_once_at_threshold(self) -> None:
        notice = ImageFailureNotice(threshold=3)
        assert [notice.record_failure() for _ in range(6)] == [False, False, True, False, False, False]
        assert notice.shown
        assert notice.failures == 6

    def test_reset_rearms(self) -> None:
        notice = ImageFailureNotice(threshold=2)
        notice.record_failure()
        notice.record_failure()
        notice.reset()
        assert not notice.shown
        assert notice.failures == 0
        assert [notice.record_failure() for _ in range(3)] == [False, True, False]

    def test_threshold_of_one(self) -> None:
        assert ImageFailureNotice(threshold=1).record_failure()

    def test_instances_are_independent(self) -> None:
        a, b = ImageFailureNotice(), ImageFailureNotice()
        for _ in range(3):
            a.record_failure()
        assert a.shown
        assert not b.shown

    def test_invalid_threshold(self) -> None:
        with pytest.raises(ValidationError):
            ImageFailureNotice(threshold=0)

    def test_threshold_from_settings(self) -> None:
        from catalog_engine.config.settings import CatalogSettings

        notice = ImageFailureNotice.from_settings(CatalogSettings(image_failure_threshold=2))
        assert notice.threshold == 2
        assert [notice.record_failure() for _ in range(2)] == [False, True]
