"""DDD building blocks – public re-export surface."""

from catalog_engine.kernel.ddd.repository import CategoryRepository, ProductRepository, Repository
from catalog_engine.kernel.ddd.specification import (
    AllOf,
    AndSpecification,
    AnyOf,
    BaseSpecification,
    LambdaSpecification,
    MatchAll,
    NotSpecification,
    OrSpecification,
    Specification,
)

__all__ = [
    "AllOf",
    "AndSpecification",
    "AnyOf",
    "BaseSpecification",
    "CategoryRepository",
    "LambdaSpecification",
    "MatchAll",
    "NotSpecification",
    "OrSpecification",
    "ProductRepository",
    "Repository",
    "Specification",
]
