"""Correlation ID middleware.

Propagates X-Correlation-ID across services: forwarded from the client when
present and safe, otherwise the request ID is reused.
"""

import uuid

from docportal.middleware._asgi import ASGIApp, Message, Receive, Scope, Send, append_header, get_header
from docportal.middleware.request_id import REQUEST_ID_ALLOWED_PATTERN


def CorrelationIDMiddleware(
    app: ASGIApp, header_name: str = "X-Correlation-ID"
) -> ASGIApp:
    """Add or forward X-Correlation-ID; fall back to request_id if set on scope state."""

    async def asgi_app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        correlation_id = get_header(scope, header_name)
        if correlation_id and not REQUEST_ID_ALLOWED_PATTERN.match(correlation_id):
            correlation_id = None
        if not correlation_id:
            correlation_id = scope.get("state", {}).get("request_id") or str(uuid.uuid4())
        scope.setdefault("state", {})["correlation_id"] = correlation_id

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                append_header(message, header_name, correlation_id)
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
