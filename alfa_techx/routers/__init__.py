# =============================================================================
# alfa_techx/routers/ - Route Groups
# =============================================================================
# Default routers for each mounted group:
# - health.py: GET /api/health
# - auth.py: /api/auth placeholder
# - admin.py: /api/admin placeholder
# - public.py: /api/public placeholder
#
# Groups are not imported here. alfa_techx.registration resolves each one
# from its "module:attribute" reference at startup, so a broken module is
# reported as a registration failure instead of an import-time crash.
# =============================================================================
