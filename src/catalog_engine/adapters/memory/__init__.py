"""In-memory adapter."""
from catalog_engine.adapters.memory.repository import (
    InMemoryCategoryRepository,
    InMemoryProductRepository,
)

__all__ = ["InMemoryCategoryRepository", "InMemoryProductRepository"]
