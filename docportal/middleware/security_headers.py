"""Security headers middleware.

Adds common security-related response headers (CSP, HSTS, nosniff, frame denial).
Headers already set by a handler are left alone.
"""

from docportal.middleware._asgi import ASGIApp, Message, Receive, Scope, Send

DEFAULT_HEADERS = {
    "Content-Security-Policy": "default-src 'none'",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def SecurityHeadersMiddleware(
    app: ASGIApp, headers: dict[str, str] | None = None
) -> ASGIApp:
    """Set security headers on all HTTP responses."""
    resolved = headers if headers is not None else DEFAULT_HEADERS
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
