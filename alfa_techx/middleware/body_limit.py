# =============================================================================
# alfa_techx/middleware/body_limit.py - Request Body Size Limit
# =============================================================================
# Caps JSON and urlencoded request bodies before any route handler sees them.
# Other content types (file uploads, raw bytes) are left to the route groups.
#
# Written as a plain ASGI middleware so chunked bodies are counted while they
# stream in: at most `limit_bytes` are ever buffered, and the 413 goes out as
# soon as the running total passes the limit.
# =============================================================================

import logging

from fastapi.responses import JSONResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from alfa_techx.exceptions import PayloadTooLargeError, error_body

logger = logging.getLogger(__name__)

LIMITED_MEDIA_TYPES = frozenset({
    "application/json",
    "application/x-www-form-urlencoded",
})


def is_limited_media_type(content_type: str) -> bool:
    """
    Check whether a Content-Type header names a body the API parses itself.

    Example:
        is_limited_media_type("application/json; charset=utf-8")  # True
        is_limited_media_type("application/vnd.api+json")          # True
        is_limited_media_type("multipart/form-data; boundary=x")   # False
    """
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type in LIMITED_MEDIA_TYPES:
        return True
    return media_type.startswith("application/") and media_type.endswith("+json")


class BodyLimitMiddleware:
    """Reject parsed bodies larger than `limit_bytes` with a 413."""

    def __init__(self, app: ASGIApp, limit_bytes: int):
        self.app = app
        self.limit_bytes = limit_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if not is_limited_media_type(headers.get("content-type", "")):
            await self.app(scope, receive, send)
            return

        declared = headers.get("content-length")
        if declared is None:
            await self._buffer_chunked(scope, receive, send)
            return

        try:
            length = int(declared)
        except ValueError:
            length = -1
        if length < 0:
            response = JSONResponse(
                status_code=400,
                content=error_body("Invalid Content-Length header"),
            )
            await response(scope, receive, send)
            return
        if length > self.limit_bytes:
            await self._too_large(scope, receive, send, f"declared {length} bytes")
            return

        await self.app(scope, receive, send)

    async def _buffer_chunked(self, scope: Scope, receive: Receive, send: Send) -> None:
        """
        Read a body of unknown length, stopping as soon as it passes the limit.

        A body within the limit is replayed to the app as a single message.
        """
        chunks: list[bytes] = []
        total = 0
        more_body = True

        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            total += len(chunk)
            if total > self.limit_bytes:
                await self._too_large(scope, receive, send, f"reached {total} bytes while streaming")
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)

        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _too_large(self, scope: Scope, receive: Receive, send: Send, size: str) -> None:
        exc = PayloadTooLargeError(self.limit_bytes)
        logger.warning(
            f"Rejected {scope['method']} {scope['path']}: body {size}, "
            f"limit is {exc.limit_bytes} bytes"
        )
        response = JSONResponse(status_code=exc.status_code, content=exc.to_dict())
        await response(scope, receive, send)
