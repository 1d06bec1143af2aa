"""Entry point for serving the Forum Questions API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables through ``Settings`` (defaults ``0.0.0.0`` and ``4000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from forum_api.app.core.config import settings
from forum_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Server is running at http://%s:%s", settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
