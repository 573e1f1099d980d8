"""
ASGI middleware shared by the API.
"""

from precision_health.config.settings import settings

BASE_SECURITY_HEADERS = (
    (b"X-Content-Type-Options", b"nosniff"),
    (b"X-Frame-Options", b"DENY"),
    (b"X-XSS-Protection", b"1; mode=block"),
    (b"Referrer-Policy", b"no-referrer"),
)
HSTS_HEADER = (b"Strict-Transport-Security", b"max-age=63072000; includeSubDomains")


class SecurityHeadersMiddleware:
    """Adds security headers to every HTTP response; API responses are also marked no-store."""

    def __init__(self, app, api_prefix: str = "/api/"):
        self.app = app
        self.api_prefix = api_prefix

    def _headers_for(self, path: str):
        headers = list(BASE_SECURITY_HEADERS)
        if settings.is_production:
            headers.append(HSTS_HEADER)
        # Health data must not sit in shared caches
        if path.startswith(self.api_prefix):
            headers.append((b"Cache-Control", b"no-store"))
        return headers

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        extra = self._headers_for(scope.get("path", ""))

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend(extra)
            await send(message)

        await self.app(scope, receive, send_with_headers)
