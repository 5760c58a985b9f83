"""SQLAlchemy ORM mixins – TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """Adds ``created_date`` and nullable ``updated_date`` columns.

    ``created_date`` falls back to the database clock when the row is
    inserted without one. ``updated_date`` stays ``NULL`` until the first
    edit; the domain model sets it, not the database.
    """

    created_date: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_date: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )


__all__ = ["TimestampMixin"]
