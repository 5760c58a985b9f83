"""Testing support – fakes and builders for catalog tests.

Hypothesis strategies live in :mod:`catalog_engine.testing.strategies`
(requires the ``test`` extra).
"""
from catalog_engine.testing.builders import ProductBuilder
from catalog_engine.testing.fakes import FakeClock, FlakyProductRepository, StorageFault

__all__ = ["FakeClock", "FlakyProductRepository", "ProductBuilder", "StorageFault"]
