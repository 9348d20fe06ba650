"""Domain layer: exceptions shared by every other layer.

No dependencies on infrastructure or presentation.
"""

from docportal.domain.exceptions import (
    AuthenticationException,
    ConflictException,
    DatabaseNotConfiguredException,
    DataStoreException,
    DuplicateEmailException,
    PortalException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "AuthenticationException",
    "ConflictException",
    "DatabaseNotConfiguredException",
    "DataStoreException",
    "DuplicateEmailException",
    "PortalException",
    "ResourceNotFoundException",
    "ValidationException",
]
