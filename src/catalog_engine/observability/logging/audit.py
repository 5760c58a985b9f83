"""Observability – AuditLogger.

Dedicated structured-log sink for catalog mutations (bulk archive,
unarchive and delete).
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from catalog_engine.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    SUCCESS = "success"
    PARTIAL = "partial"
    FAILURE = "failure"


class AuditLogger:
    """Emits one ``audit.<action>`` event per recorded mutation.

    Entries are logged at ``WARNING`` so they pass restrictive level filters.
    """

    def __init__(self, service: str = "catalog", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def record(
        self,
        action: str,
        resource: str,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        **extra: Any,
    ) -> None:
        self._log.warning(
            f"audit.{action}",
            service=self._service,
            resource=resource,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        )


__all__ = ["AuditLogger", "AuditOutcome"]
