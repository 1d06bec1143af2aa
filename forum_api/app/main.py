"""
Main entrypoint for the Forum Questions API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn forum_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The store handle is created here, initialised on startup (applying
    migrations) and closed on shutdown.  It is stored on ``app.state``
    and handed to the services through FastAPI dependencies.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use instead of the environment-derived
        defaults.  Tests pass their own instance pointing at a
        temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings)

    db = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if it does not exist and brings the
        # schema up to date.
        db.init_db()
        logger.info("Database ready at %s", db.path)
        yield
        db.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it via ``forum_api.app.main:app``.
app = create_app()
