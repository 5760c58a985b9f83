"""Observability – structlog configuration and logger helpers."""
from catalog_engine.observability.logging.audit import AuditLogger, AuditOutcome
from catalog_engine.observability.logging.factory import JsonLoggerFactory, configure_logging
from catalog_engine.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "configure_logging",
    "get_logger",
]
