# =============================================================================
# alfa_techx/routers/admin.py - Admin Route Group
# =============================================================================
# Mounted at /api/admin. Replace through the ADMIN_ROUTES setting.
# =============================================================================

from fastapi import APIRouter

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"])
async def admin_index() -> dict:
    """Confirm the admin route group is mounted."""
    return {"success": True, "message": "Admin routes are available"}
