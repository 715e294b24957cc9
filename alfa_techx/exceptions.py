# =============================================================================
# alfa_techx/exceptions.py - Exceptions and Error Responders
# =============================================================================
# Centralized exception handling for the API.
#
# Every error body uses the same envelope:
#   {"success": false, "message": "..."}
#
# Handlers are installed on the app by install_exception_handlers(). The
# terminal 500 responder is also used by ErrorHandlerMiddleware so that
# unhandled errors still pass back through the security/CORS middleware.
# =============================================================================

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alfa_techx.config import Settings

logger = logging.getLogger(__name__)


ROUTE_NOT_FOUND_MESSAGE = "Route not found"
SERVER_ERROR_MESSAGE = "Something went wrong!"
GENERIC_ERROR_DETAIL = "Internal server error"


class AlfaTechXException(Exception):
    """
    Base exception for the Alfa TechX API.

    Route groups can raise subclasses to produce an error response in the
    standard envelope without building a JSONResponse themselves.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "success": False,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class RouteRegistrationError(AlfaTechXException):
    """Raised when a route group reference cannot be turned into a router."""

    def __init__(self, group: str, reason: str):
        super().__init__(
            message=f"Cannot register {group} routes: {reason}",
            details={"group": group, "reason": reason},
        )
        self.group = group


class PayloadTooLargeError(AlfaTechXException):
    """Raised when a parsed request body exceeds the configured limit."""

    def __init__(self, limit_bytes: int):
        super().__init__(
            message="Request entity too large",
            status_code=413,
        )
        self.limit_bytes = limit_bytes


# =============================================================================
# Response Builders
# =============================================================================

def error_body(message: str, **extra: Any) -> dict[str, Any]:
    """Build the standard error envelope."""
    return {"success": False, "message": message, **extra}


def route_not_found_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(ROUTE_NOT_FOUND_MESSAGE),
    )


def server_error_response(settings: Settings, exc: Exception) -> JSONResponse:
    """
    Build the terminal 500 response.

    The raw exception message is only exposed in development mode. In every
    other mode the client sees a generic detail string.
    """
    detail = str(exc) if settings.is_development else GENERIC_ERROR_DETAIL
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(SERVER_ERROR_MESSAGE, error=detail),
    )


def log_unhandled(request: Request, exc: Exception) -> None:
    """Log an unhandled request error server-side with its stack trace."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )


# =============================================================================
# Exception Handlers
# =============================================================================

def install_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all error responders on the FastAPI app."""

    @app.exception_handler(AlfaTechXException)
    async def handle_alfa_exception(request: Request, exc: AlfaTechXException):
        """Handle custom Alfa TechX exceptions."""
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """
        Handle HTTP errors raised by routing or by route groups.

        Unmatched paths and unsupported methods both resolve to the generic
        404 responder, since only declared method/path pairs are routed.
        Errors raised deliberately by handlers keep their status and detail.
        A handler raising a bare 404 (no detail) cannot be told apart from a
        routing miss and is answered as "Route not found"; handlers that need
        their own message pass a detail.
        """
        if _is_unmatched_route(exc):
            return route_not_found_response()
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors with field-level details."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content=error_body(
                "Validation error",
                errors=[
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            ),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(request: Request, exc: Exception):
        """Last-resort handler for errors raised outside the middleware guard."""
        log_unhandled(request, exc)
        return server_error_response(settings, exc)


def _is_unmatched_route(exc: StarletteHTTPException) -> bool:
    # Starlette's router and StaticFiles raise these with their default details
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return exc.detail in (None, "Not Found")
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return exc.detail in (None, "Method Not Allowed")
    return False
