"""Observability – structured logging."""
from catalog_engine.observability.logging import AuditLogger, AuditOutcome, configure_logging, get_logger

__all__ = ["AuditLogger", "AuditOutcome", "configure_logging", "get_logger"]
