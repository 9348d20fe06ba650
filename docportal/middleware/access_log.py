"""Access log middleware: one INFO line per HTTP request with status and duration.

Reads request_id from scope state, so it must sit inside RequestIDMiddleware.
Never logs headers or bodies (they may carry bearer tokens or passwords).
"""

import logging
import time

from docportal.middleware._asgi import ASGIApp, Message, Receive, Scope, Send
from docportal.shared.context import get_current_user_id

logger = logging.getLogger("docportal.access")


def AccessLogMiddleware(app: ASGIApp) -> ASGIApp:
    """Log method, path, status code and elapsed milliseconds."""

    async def asgi_app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "%s %s %s %.1fms request_id=%s user_id=%s",
                scope.get("method"),
                scope.get("path"),
                status_code,
                (time.perf_counter() - started) * 1000,
                scope.get("state", {}).get("request_id", "-"),
                get_current_user_id() or "-",
            )

    return asgi_app
