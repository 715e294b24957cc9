# =============================================================================
# alfa_techx/middleware/rate_limit.py - Per-IP Rate Limiting
# =============================================================================
# Fixed-window request counting per client address.
#
# Counting is done by the `limits` library (the engine behind slowapi) with
# an in-memory, lock-protected storage, so concurrent requests from the same
# client never lose an increment. The client key is slowapi's
# get_remote_address.
#
# Every request counts, whether or not it matches a route. Once a client
# exceeds the cap, it receives a plain-text 429 until its window resets.
# =============================================================================

import logging
import math
import time
from typing import Callable

from limits import RateLimitItemPerMinute
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp

from alfa_techx.config import DEFAULT_RATE_LIMIT_MESSAGE

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Reject clients that exceed `max_requests` within a window of
    `window_minutes` minutes.

    Args:
        app: The wrapped ASGI application
        max_requests: Requests allowed per client per window
        window_minutes: Window length in minutes
        message: Body of the 429 response
        key_func: Maps a request to its client key (client IP by default)
    """

    def __init__(
        self,
        app: ASGIApp,
        max_requests: int = 100,
        window_minutes: int = 15,
        message: str = DEFAULT_RATE_LIMIT_MESSAGE,
        key_func: Callable[[Request], str] = get_remote_address,
    ):
        super().__init__(app)
        self.item = RateLimitItemPerMinute(max_requests, window_minutes)
        self.limiter = FixedWindowRateLimiter(MemoryStorage())
        self.message = message
        self.key_func = key_func

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        key = self.key_func(request)
        allowed = self.limiter.hit(self.item, key)
        reset_at, remaining = self.limiter.get_window_stats(self.item, key)
        reset_in = max(0, math.ceil(reset_at - time.time()))

        if not allowed:
            logger.warning(f"Rate limit exceeded for {key} on {request.method} {request.url.path}")
            response: Response = PlainTextResponse(
                self.message,
                status_code=429,
                headers={"Retry-After": str(reset_in)},
            )
        else:
            response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.item.amount)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(reset_in)
        return response
