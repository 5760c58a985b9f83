"""Application search – criteria, predicate composition, sorting and the search service."""
from catalog_engine.application.search.criteria import (
    Criteria,
    SortDirection,
    SortKey,
    StatusScope,
)
from catalog_engine.application.search.facets import CatalogFacets, CatalogStats
from catalog_engine.application.search.predicates import PredicateComposer
from catalog_engine.application.search.result import SearchResult
from catalog_engine.application.search.service import CatalogSearchService
from catalog_engine.application.search.sorting import Sorter

__all__ = [
    "CatalogFacets",
    "CatalogSearchService",
    "CatalogStats",
    "Criteria",
    "PredicateComposer",
    "SearchResult",
    "SortDirection",
    "SortKey",
    "Sorter",
    "StatusScope",
]
