"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_management_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from datetime import datetime, timezone

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.db import init_db


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    # Read by the health endpoints to report uptime.
    app.state.started_at = datetime.now(timezone.utc)

    app.include_router(v1_router, prefix="/api/v1")
    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if needed and applies pending migrations.
        init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
