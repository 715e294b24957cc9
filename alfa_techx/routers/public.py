# =============================================================================
# alfa_techx/routers/public.py - Public Route Group
# =============================================================================
# Mounted at /api/public. Replace through the PUBLIC_ROUTES setting.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"])
async def public_index() -> dict:
    """Confirm the public route group is mounted."""
    return {"success": True, "message": "Public routes are available"}
