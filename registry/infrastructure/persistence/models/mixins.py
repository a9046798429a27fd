"""SQLAlchemy mixins shared by every registry table.

Provides: CuidMixin, TimestampMixin, and the combined RecordModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from registry.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at (server default, timezone-aware).

    Registry records are write-once, so there is no updated_at.
    """

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )


class RecordModel(CuidMixin, TimestampMixin):
    """Combined mixin: CUID + created_at. Common for all registry models."""

    __abstract__ = True
