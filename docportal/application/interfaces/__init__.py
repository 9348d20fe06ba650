"""Application interfaces (ports) implemented by infrastructure."""

from docportal.application.interfaces.repositories import (
    IClientRepository,
    ICollectionRepository,
    IEntityRepository,
    IFileRepository,
    IFirmRepository,
    IRequestRepository,
    IUserRepository,
)

__all__ = [
    "IClientRepository",
    "ICollectionRepository",
    "IEntityRepository",
    "IFileRepository",
    "IFirmRepository",
    "IRequestRepository",
    "IUserRepository",
]
