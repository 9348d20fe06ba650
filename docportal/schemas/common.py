"""Schemas shared by several resources."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class FirmSummaryResponse(BaseModel):
    """Flat firm: firm list items, and the firm embedded in users and clients."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
