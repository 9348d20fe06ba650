"""Collection ORM model: a batch of document requests sent to one client."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docportal.core.constants import STATUS_PENDING
from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class Collection(PortalModel, Base):
    """Collection model. Table: collection.

    client_id and user_id are expected to belong to the same firm; the store
    does not enforce it.
    """

    __tablename__ = "collection"

    client_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("client.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default=STATUS_PENDING)
    access_token: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
