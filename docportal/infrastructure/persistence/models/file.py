"""File ORM model: metadata for an uploaded blob. Bytes live in external storage."""

from uuid import UUID

from sqlalchemy import BigInteger, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class File(PortalModel, Base):
    """File metadata model. Table: file."""

    __tablename__ = "file"

    request_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("document_request.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    storage_key: Mapped[str] = mapped_column(String, nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mime_type: Mapped[str] = mapped_column(String, nullable=False)
