"""Application categories."""
from catalog_engine.application.categories.service import CategoryService

__all__ = ["CategoryService"]
