"""ORM models. Importing this package registers every table on Base.metadata."""

from docportal.infrastructure.persistence.models.client import Client
from docportal.infrastructure.persistence.models.collection import Collection
from docportal.infrastructure.persistence.models.file import File
from docportal.infrastructure.persistence.models.firm import Firm
from docportal.infrastructure.persistence.models.request import DocumentRequest
from docportal.infrastructure.persistence.models.user import User

__all__ = ["Client", "Collection", "DocumentRequest", "File", "Firm", "User"]
