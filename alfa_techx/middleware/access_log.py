# =============================================================================
# alfa_techx/middleware/access_log.py - Development Access Log
# =============================================================================
# One concise line per request, e.g.:
#   GET /api/health 200 1.482 ms - 86
#
# Only installed when NODE_ENV=development.
# =============================================================================

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("alfa_techx.access")


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        length = response.headers.get("content-length", "-")

        logger.info(f"{request.method} {target} {response.status_code} {elapsed_ms:.3f} ms - {length}")
        return response
