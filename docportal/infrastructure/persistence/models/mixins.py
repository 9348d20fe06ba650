"""SQLAlchemy mixins shared by every portal model.

Provides: UuidPkMixin, TimestampMixin, and the combined PortalModel.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from docportal.shared.utils.generators import generate_uuid


class UuidPkMixin:
    """Mixin for models keyed by a UUID primary key, generated client-side."""

    @declared_attr
    def id(cls) -> Mapped[UUID]:
        return mapped_column(Uuid, primary_key=True, default=generate_uuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class PortalModel(UuidPkMixin, TimestampMixin):
    """UUID id plus timestamps; every entity in the firm tree uses this."""
