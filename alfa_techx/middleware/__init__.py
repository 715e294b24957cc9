# =============================================================================
# alfa_techx/middleware/ - Request Pipeline Stages
# =============================================================================
# Cross-cutting policies applied to every request, outermost first:
# - security_headers.py: protective response headers
# - rate_limit.py: per-IP fixed-window limiter (429)
# - CORS: Starlette's CORSMiddleware locked to FRONTEND_URL
# - body_limit.py: JSON / urlencoded size cap (413)
# - access_log.py: concise request log (development only)
# - errors.py: terminal 500 handler
#
# build_middleware() returns the stack as an explicit ordered list that
# create_app() hands to FastAPI.
# =============================================================================

from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware import Middleware

from alfa_techx.config import Settings
from alfa_techx.middleware.access_log import AccessLogMiddleware
from alfa_techx.middleware.body_limit import BodyLimitMiddleware
from alfa_techx.middleware.errors import ErrorHandlerMiddleware
from alfa_techx.middleware.rate_limit import RateLimitMiddleware
from alfa_techx.middleware.security_headers import (
    SecurityHeadersConfig,
    SecurityHeadersMiddleware,
)

CORS_ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


def build_middleware(settings: Settings) -> list[Middleware]:
    """
    Compose the request pipeline for the given settings.

    The first entry wraps all the others, so the list reads in the order a
    request travels through it.

    Args:
        settings: Application settings

    Returns:
        list[Middleware]: Ordered middleware definitions for FastAPI
    """
    stack = [
        Middleware(SecurityHeadersMiddleware),
        Middleware(
            RateLimitMiddleware,
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_minutes=settings.RATE_LIMIT_WINDOW_MINUTES,
            message=settings.RATE_LIMIT_MESSAGE,
        ),
        Middleware(
            CORSMiddleware,
            allow_origins=[settings.FRONTEND_URL],
            allow_credentials=True,
            allow_methods=CORS_ALLOWED_METHODS,
            allow_headers=["*"],
        ),
        Middleware(BodyLimitMiddleware, limit_bytes=settings.body_limit_bytes),
    ]

    if settings.is_development:
        stack.append(Middleware(AccessLogMiddleware))

    stack.append(Middleware(ErrorHandlerMiddleware, settings=settings))
    return stack


__all__ = [
    "AccessLogMiddleware",
    "BodyLimitMiddleware",
    "CORS_ALLOWED_METHODS",
    "ErrorHandlerMiddleware",
    "RateLimitMiddleware",
    "SecurityHeadersConfig",
    "SecurityHeadersMiddleware",
    "build_middleware",
]
