"""Application pagination – offset paging primitives."""
from catalog_engine.application.pagination.page import Page, paginate, total_pages
from catalog_engine.application.pagination.page_request import PageRequest

__all__ = ["Page", "PageRequest", "paginate", "total_pages"]
