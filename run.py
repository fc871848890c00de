"""Entry point for the Todo BFF server.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the same environment variables the application reads (see
``todo_bff.app.core.config``): ``HOST`` (default ``0.0.0.0``), ``PORT``
(default ``4000``) and ``LOG_LEVEL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todo_bff.app.core.config import settings
from todo_bff.app.main import app


async def run_server() -> None:
    """Serve the BFF until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Starting %s on http://%s:%d (GraphQL at /graphql)",
        settings.project_name,
        settings.host,
        settings.port,
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_server())
    except (KeyboardInterrupt, SystemExit):
        pass
