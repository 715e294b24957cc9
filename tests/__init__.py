# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Alfa TechX API:
# - test_config.py: Settings defaults, overrides and validation
# - test_health.py: Health check endpoint
# - test_errors.py: 404, HTTP error and terminal 500 responders
# - test_rate_limit.py, test_cors.py, test_body_limit.py,
#   test_security_headers.py, test_access_log.py: pipeline stages
# - test_static.py: /uploads static files
# - test_registration.py, test_main.py: startup and fail-fast registration
#
# sample_routes.py and broken_routes.py are route modules the tests mount.
#
# Run tests with: pytest
# =============================================================================
