"""Request ORM model: one requested document line within a collection."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docportal.core.constants import STATUS_PENDING
from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class DocumentRequest(PortalModel, Base):
    """Document request model. Table: document_request."""

    __tablename__ = "document_request"

    collection_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("collection.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String, nullable=False, default=STATUS_PENDING)
