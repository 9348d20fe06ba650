"""Firm ORM model (root of the tenant tree)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from docportal.infrastructure.persistence.database import Base
from docportal.infrastructure.persistence.models.mixins import PortalModel


class Firm(PortalModel, Base):
    """Accounting firm. Table: firm."""

    __tablename__ = "firm"

    name: Mapped[str] = mapped_column(String, nullable=False)
