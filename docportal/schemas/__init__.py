"""Pydantic request/response schemas for the API."""

from docportal.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from docportal.schemas.client import ClientCreateRequest, ClientResponse, ClientUpdate
from docportal.schemas.collection import (
    CollectionCreateRequest,
    CollectionResponse,
    CollectionUpdate,
)
from docportal.schemas.file import FileCreateRequest, FileResponse, FileUpdate
from docportal.schemas.firm import (
    FirmCreateRequest,
    FirmResponse,
    FirmSummaryResponse,
    FirmUpdate,
)
from docportal.schemas.health import HealthResponse
from docportal.schemas.request import RequestCreateRequest, RequestResponse, RequestUpdate
from docportal.schemas.user import UserCreateRequest, UserResponse, UserUpdate

__all__ = [
    "ClientCreateRequest",
    "ClientResponse",
    "ClientUpdate",
    "CollectionCreateRequest",
    "CollectionResponse",
    "CollectionUpdate",
    "FileCreateRequest",
    "FileResponse",
    "FileUpdate",
    "FirmCreateRequest",
    "FirmResponse",
    "FirmSummaryResponse",
    "FirmUpdate",
    "HealthResponse",
    "LoginRequest",
    "RegisterRequest",
    "RequestCreateRequest",
    "RequestResponse",
    "RequestUpdate",
    "TokenResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdate",
]
