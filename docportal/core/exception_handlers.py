"""Centralized exception handlers for the FastAPI app.

Every error leaves the API as `{"error", "message", "details"}`. Domain
exceptions carry their own code; the table below maps it to a status.
Register with register_exception_handlers(app).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docportal.core.config import get_settings
from docportal.domain.exceptions import PortalException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "INTERNAL_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}

# Challenge sent with every 401 so clients know which scheme to retry with.
_AUTH_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _error_body(error: str, message: Any, details: Any = None) -> dict[str, Any]:
    return {"error": error, "message": message, "details": details if details is not None else {}}


def _portal_exception_handler(request: Request, exc: PortalException) -> JSONResponse:
    """Map a PortalException to its status; 401s carry the Bearer challenge."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s %s", exc.error_code, request.method, request.url.path)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
        headers=_AUTH_CHALLENGE if status == 401 else None,
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 listing the offending fields (type, location, message only)."""
    errors = [
        {key: err[key] for key in ("type", "loc", "msg") if key in err}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content=_error_body("VALIDATION_ERROR", "Request validation failed", errors),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Framework HTTP errors (unknown route, wrong method, rate limit) in the same shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", exc.detail),
        headers=exc.headers,
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; the exception text is exposed only when debug is on."""
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(status_code=500, content=_error_body("INTERNAL_ERROR", message))


def register_exception_handlers(app: FastAPI) -> None:
    """Register the handlers above on app. Call once from create_app()."""
    app.add_exception_handler(PortalException, _portal_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
