"""Application notices – per-session UI counters."""
from catalog_engine.application.notices.image_failure import ImageFailureNotice

__all__ = ["ImageFailureNotice"]
