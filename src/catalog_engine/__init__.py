"""
catalog_engine – product catalog search, filtering and bulk state changes.

Import path convention::

    from catalog_engine.application.search import CatalogSearchService, Criteria
    from catalog_engine.application.bulk import BulkAction, BulkMutator
    from catalog_engine.application.suggestions import SuggestionEngine
    from catalog_engine.adapters.memory import InMemoryProductRepository
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
