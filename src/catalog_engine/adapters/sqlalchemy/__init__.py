"""SQLAlchemy adapter – async session factory, ORM models and repositories."""
from catalog_engine.adapters.sqlalchemy.mixins import TimestampMixin
from catalog_engine.adapters.sqlalchemy.models import Base, CategoryRecord, ProductRecord
from catalog_engine.adapters.sqlalchemy.repository import (
    SqlAlchemyCategoryRepository,
    SqlAlchemyProductRepository,
)
from catalog_engine.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "Base",
    "CategoryRecord",
    "ProductRecord",
    "SqlAlchemyCategoryRepository",
    "SqlAlchemyProductRepository",
    "SqlAlchemySessionFactory",
    "TimestampMixin",
]
