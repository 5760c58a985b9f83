"""Application bulk – multi-record archive, unarchive and delete."""
from catalog_engine.application.bulk.models import BulkAction, BulkRequest, BulkResult, MAX_BULK_IDS
from catalog_engine.application.bulk.mutator import BulkMutator

__all__ = ["BulkAction", "BulkMutator", "BulkRequest", "BulkResult", "MAX_BULK_IDS"]
