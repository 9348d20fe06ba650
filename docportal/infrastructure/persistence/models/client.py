"""Client ORM model: a company the firm collects documents from."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class Client(PortalModel, Base):
    """Client model. Table: client."""

    __tablename__ = "client"

    firm_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("firm.id", ondelete="CASCADE"), nullable=False, index=True
    )
    company_name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, nullable=False)
