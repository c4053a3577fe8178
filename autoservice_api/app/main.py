"""
Main entrypoint for the Autoservice API.

``create_app`` builds and configures the FastAPI application; it is
instantiated at import time as ``app`` so it can be served with::

    uvicorn autoservice_api.app.main:app --reload

Title, version and log level come from ``Settings`` in ``core.config``.
"""

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .core.db import init_db


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Sets up logging, mounts the versioned routers under ``/api/v1``
    and registers a startup hook that applies database migrations.
    """
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file on first start and brings the schema
        # up to date.
        init_db()

    return app


app = create_app()
