"""
Main entrypoint for the Todo BFF.

This module assembles the FastAPI application, sets up logging, CORS
and the API routers.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn todo_bff.app.main:app --reload --port 4000

The GraphQL endpoint is served at ``/graphql`` and the liveness check
at ``/health``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup messages
    # use the configured format and level.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        init_store()
        logger.info(
            "%s %s ready, GraphQL endpoint at /graphql", settings.project_name, settings.api_version
        )
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
