"""API v1 router aggregation.

Public routers (health, register, login) are included as-is; every other
router carries the bearer-token gate as a router-level dependency, so no
protected handler can run without an authenticated user id.
"""

from fastapi import APIRouter, Depends

from docportal.api.v1.dependencies import require_user_id
from docportal.api.v1.endpoints import (
    auth,
    clients,
    collections,
    files,
    firms,
    health,
    requests,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, tags=["auth"])

_protected = [Depends(require_user_id)]

api_router.include_router(
    users.router, prefix="/users", tags=["users"], dependencies=_protected
)
api_router.include_router(
    firms.router, prefix="/firms", tags=["firms"], dependencies=_protected
)
api_router.include_router(
    clients.router, prefix="/clients", tags=["clients"], dependencies=_protected
)
api_router.include_router(
    collections.router, prefix="/collections", tags=["collections"], dependencies=_protected
)
api_router.include_router(
    requests.router, prefix="/requests", tags=["requests"], dependencies=_protected
)
api_router.include_router(
    files.router, prefix="/files", tags=["files"], dependencies=_protected
)
