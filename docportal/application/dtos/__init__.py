"""Application DTOs: flat read-models and assembled (nested) views."""

from docportal.application.dtos.client import ClientDetail, ClientResult
from docportal.application.dtos.collection import CollectionDetail, CollectionResult
from docportal.application.dtos.file import FileDetail, FileResult
from docportal.application.dtos.firm import FirmDetail, FirmResult
from docportal.application.dtos.request import RequestDetail, RequestResult
from docportal.application.dtos.user import UserCredentials, UserDetail, UserResult

__all__ = [
    "ClientDetail",
    "ClientResult",
    "CollectionDetail",
    "CollectionResult",
    "FileDetail",
    "FileResult",
    "FirmDetail",
    "FirmResult",
    "RequestDetail",
    "RequestResult",
    "UserCredentials",
    "UserDetail",
    "UserResult",
]
