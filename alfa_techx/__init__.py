# =============================================================================
# alfa_techx/ - Alfa TechX API Package
# =============================================================================
# This package contains the HTTP API bootstrap:
# - main.py: App factory and process entry point
# - config.py: Environment variable loading and settings
# - middleware/: Security headers, rate limiting, CORS, body limit, logging
# - registration.py: Route group resolution and fail-fast mounting
# - exceptions.py: Error envelope and 404/500 responders
# - routers/: Health check and default route groups
# =============================================================================

__version__ = "1.0.0"
