"""User ORM model for authentication (firm-scoped)."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class User(PortalModel, Base):
    """User model. Table: app_user. Email is stored lower-cased and unique across firms."""

    __tablename__ = "app_user"

    firm_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey("firm.id", ondelete="CASCADE"), nullable=False, index=True
    )
    email: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
