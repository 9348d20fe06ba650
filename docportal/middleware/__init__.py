"""HTTP middleware: request ID, correlation ID, access log, security headers.

Applied in main app; order matters (last added = outermost).
"""

from docportal.middleware.access_log import AccessLogMiddleware
from docportal.middleware.correlation_id import CorrelationIDMiddleware
from docportal.middleware.request_id import RequestIDMiddleware
from docportal.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "AccessLogMiddleware",
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
