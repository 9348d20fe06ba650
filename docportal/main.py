"""Application factory.

create_app() assembles the service: lifespan, error handlers, rate limiter,
middleware stack and the /api/v1 routes. Settings are read when it runs, not
at import, so tests can prepare the environment first.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from docportal.api.v1 import api_router
from docportal.core.config import get_settings
from docportal.core.exception_handlers import register_exception_handlers
from docportal.core.lifespan import create_lifespan
from docportal.core.limiter import limiter
from docportal.middleware import (
    AccessLogMiddleware,
    CorrelationIDMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
)


def create_app() -> FastAPI:
    """Return a fully wired FastAPI app."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Added innermost first; RequestID ends up outermost so every layer sees the id.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CorrelationIDMiddleware,
        header_name=settings.correlation_id_header,
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")

    return app
