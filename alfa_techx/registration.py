# =============================================================================
# alfa_techx/registration.py - Route Group Registration
# =============================================================================
# Resolves and mounts the route groups (auth, admin, public, health).
#
# Registration never raises: each attempt returns a RegistrationResult, and
# the startup routine decides whether the process may continue. Any failed
# group means the server must not start in a partially-configured state.
#
# Usage:
#   results = register_routes(app, default_route_groups(settings))
#   if not all(result.ok for result in results):
#       sys.exit(1)
# =============================================================================

import importlib
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, FastAPI

from alfa_techx.config import Settings
from alfa_techx.exceptions import RouteRegistrationError

logger = logging.getLogger(__name__)

HEALTH_ROUTES = "alfa_techx.routers.health:router"


# =============================================================================
# Models
# =============================================================================

@dataclass(frozen=True)
class RouteGroup:
    """
    A path-prefixed group of handlers provided by a router module.

    Attributes:
        name: Group name used in logs and OpenAPI tags (e.g. "auth")
        prefix: URL prefix the router is mounted under (e.g. "/api/auth")
        target: "module.path:attribute" reference to an APIRouter
    """
    name: str
    prefix: str
    target: str


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of registering one route group."""
    group: str
    ok: bool
    error: Optional[Exception] = None


def default_route_groups(settings: Settings) -> list[RouteGroup]:
    """The groups every server mounts, in registration order."""
    return [
        RouteGroup(name="auth", prefix="/api/auth", target=settings.AUTH_ROUTES),
        RouteGroup(name="admin", prefix="/api/admin", target=settings.ADMIN_ROUTES),
        RouteGroup(name="public", prefix="/api/public", target=settings.PUBLIC_ROUTES),
        RouteGroup(name="health check", prefix="/api", target=HEALTH_ROUTES),
    ]


# =============================================================================
# Registration
# =============================================================================

def resolve_router(group: RouteGroup) -> APIRouter:
    """
    Import the APIRouter a route group points at.

    Args:
        group: The route group to resolve

    Returns:
        APIRouter: The router object named by group.target

    Raises:
        RouteRegistrationError: If the reference is malformed or does not
            name an APIRouter
        ImportError: If the module cannot be imported
    """
    module_path, _, attribute = group.target.partition(":")
    if not module_path or not attribute:
        raise RouteRegistrationError(
            group.name,
            f"invalid reference '{group.target}', expected 'module.path:attribute'",
        )

    module = importlib.import_module(module_path)

    router = getattr(module, attribute, None)
    if router is None:
        raise RouteRegistrationError(
            group.name, f"module '{module_path}' has no attribute '{attribute}'"
        )
    if not isinstance(router, APIRouter):
        raise RouteRegistrationError(
            group.name,
            f"'{group.target}' is a {type(router).__name__}, not an APIRouter",
        )
    return router


def register_route_group(app: FastAPI, group: RouteGroup) -> RegistrationResult:
    """
    Mount a single route group on the app.

    Every failure (bad reference, import error inside the module, wrong
    type, error while including routes) is logged and returned in the
    result rather than raised.
    """
    logger.info(f"Registering {group.name} routes...")

    try:
        router = resolve_router(group)
        app.include_router(router, prefix=group.prefix, tags=[group.name.title()])
    except Exception as e:
        logger.error(f"Error registering {group.name} routes: {e}", exc_info=True)
        return RegistrationResult(group=group.name, ok=False, error=e)

    logger.info(f"{group.name.capitalize()} routes registered successfully")
    return RegistrationResult(group=group.name, ok=True)


def register_routes(app: FastAPI, groups: list[RouteGroup]) -> list[RegistrationResult]:
    """
    Register groups in order, stopping at the first failure.

    Returns:
        list[RegistrationResult]: One result per attempted group; the last
        one is the failure if registration stopped early
    """
    results = []
    for group in groups:
        result = register_route_group(app, group)
        results.append(result)
        if not result.ok:
            break
    return results
