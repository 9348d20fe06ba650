"""Application services: assembly, authentication, and write-side rules."""

from docportal.application.services.auth_service import AuthService
from docportal.application.services.collection_service import CollectionService
from docportal.application.services.response_assembler import ResponseAssembler
from docportal.application.services.user_service import UserService

__all__ = [
    "AuthService",
    "CollectionService",
    "ResponseAssembler",
    "UserService",
]
