# =============================================================================
# alfa_techx/middleware/security_headers.py - Protective Response Headers
# =============================================================================
# Adds the standard set of security headers to every response:
# CSP, cross-origin isolation, HSTS, MIME sniffing, framing, referrer, etc.
#
# Headers a handler already set are left alone, so a route group can relax
# or tighten a single header for its own responses.
# =============================================================================

from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp


DEFAULT_CONTENT_SECURITY_POLICY = (
    "default-src 'self';"
    "base-uri 'self';"
    "font-src 'self' https: data:;"
    "form-action 'self';"
    "frame-ancestors 'self';"
    "img-src 'self' data:;"
    "object-src 'none';"
    "script-src 'self';"
    "script-src-attr 'none';"
    "style-src 'self' https: 'unsafe-inline';"
    "upgrade-insecure-requests"
)


@dataclass(frozen=True)
class SecurityHeadersConfig:
    """
    Values for the protective headers.

    Set a field to None to stop emitting that header.
    """

    content_security_policy: str | None = DEFAULT_CONTENT_SECURITY_POLICY
    cross_origin_opener_policy: str | None = "same-origin"
    cross_origin_resource_policy: str | None = "same-origin"
    origin_agent_cluster: str | None = "?1"
    referrer_policy: str | None = "no-referrer"
    strict_transport_security: str | None = "max-age=15552000; includeSubDomains"
    x_content_type_options: str | None = "nosniff"
    x_dns_prefetch_control: str | None = "off"
    x_download_options: str | None = "noopen"
    x_frame_options: str | None = "SAMEORIGIN"
    x_permitted_cross_domain_policies: str | None = "none"
    x_xss_protection: str | None = "0"

    def as_headers(self) -> list[tuple[str, str]]:
        """Return (header name, value) pairs for every enabled header."""
        pairs = [
            ("Content-Security-Policy", self.content_security_policy),
            ("Cross-Origin-Opener-Policy", self.cross_origin_opener_policy),
            ("Cross-Origin-Resource-Policy", self.cross_origin_resource_policy),
            ("Origin-Agent-Cluster", self.origin_agent_cluster),
            ("Referrer-Policy", self.referrer_policy),
            ("Strict-Transport-Security", self.strict_transport_security),
            ("X-Content-Type-Options", self.x_content_type_options),
            ("X-DNS-Prefetch-Control", self.x_dns_prefetch_control),
            ("X-Download-Options", self.x_download_options),
            ("X-Frame-Options", self.x_frame_options),
            ("X-Permitted-Cross-Domain-Policies", self.x_permitted_cross_domain_policies),
            ("X-XSS-Protection", self.x_xss_protection),
        ]
        return [(name, value) for name, value in pairs if value is not None]


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Apply SecurityHeadersConfig to every response and drop X-Powered-By."""

    def __init__(self, app: ASGIApp, config: SecurityHeadersConfig | None = None):
        super().__init__(app)
        self.headers = (config or SecurityHeadersConfig()).as_headers()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)

        for name, value in self.headers:
            response.headers.setdefault(name, value)

        if "x-powered-by" in response.headers:
            del response.headers["x-powered-by"]

        return response
