# =============================================================================
# alfa_techx/routers/auth.py - Authentication Route Group
# =============================================================================
# Mounted at /api/auth.
#
# Placeholder for the authentication module. Signup, login and token
# handling live in the deployment's own module, wired in through the
# AUTH_ROUTES setting ("package.module:router"). This router only makes the
# mount observable.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"])
async def auth_index() -> dict:
    """Confirm the auth route group is mounted."""
    return {"success": True, "message": "Auth routes are available"}
