# =============================================================================
# alfa_techx/middleware/errors.py - Terminal Error Handler
# =============================================================================
# Innermost middleware: turns any exception escaping a route into the 500
# response. Sitting inside the pipeline means the error response still
# receives security, rate limit and CORS headers on the way out.
# =============================================================================

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from alfa_techx.config import Settings
from alfa_techx.exceptions import log_unhandled, server_error_response


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch unhandled request errors, log them, and answer 500."""

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            log_unhandled(request, exc)
            return server_error_response(self.settings, exc)
