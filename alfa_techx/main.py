# =============================================================================
# alfa_techx/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the Alfa TechX API: middleware pipeline, error handlers, static
# uploads, and route groups. Then binds the listener on all interfaces.
#
# Usage:
#   alfa-techx
#   uvicorn --factory alfa_techx.main:create_app --host 0.0.0.0 --port 5000
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from alfa_techx.config import Settings, load_settings
from alfa_techx.exceptions import install_exception_handlers
from alfa_techx.middleware import build_middleware
from alfa_techx.registration import default_route_groups, register_routes

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Assemble the application for the given settings.

    Steps, in order:
    1. Build the ordered middleware pipeline
    2. Install the error responders
    3. Mount /uploads as static files
    4. Register auth, admin, public and health route groups

    If any route group fails to register, the process exits with status 1
    instead of returning a partially configured app.

    Args:
        settings: Application settings; loaded from the environment if omitted

    Returns:
        FastAPI: The configured application
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Alfa TechX Server running on port {settings.PORT}")
        logger.info(f"Environment: {settings.NODE_ENV}")
        yield
        logger.info("Shutting down Alfa TechX API")

    app = FastAPI(
        title="Alfa TechX API",
        version="1.0.0",
        # Unrouted paths must answer with the JSON 404, docs included
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        middleware=build_middleware(settings),
        lifespan=lifespan,
    )
    app.state.settings = settings

    install_exception_handlers(app, settings)

    uploads_dir = Path(settings.UPLOADS_DIR)
    uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=uploads_dir), name="uploads")

    results = register_routes(app, default_route_groups(settings))
    failed = [result for result in results if not result.ok]
    if failed:
        logger.critical(f"Aborting startup: {failed[0].group} routes failed to register")
        sys.exit(1)

    return app


def main() -> None:
    """Console entry point: load settings, build the app, serve it."""
    settings = load_settings()
    configure_logging(settings)

    app = create_app(settings)

    # Bind all interfaces so the server is reachable inside containers
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        server_header=False,
        access_log=False,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
