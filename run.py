"""Entry point for the Album API server.

Serves the FastAPI application with Uvicorn.  Host, port and log level
are read from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
defaults are ``localhost``, ``8080`` and ``INFO``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from album_api.app.core.config import settings
from album_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Requests are already logged by the application middleware.
        access_log=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Server stopped by user")


if __name__ == "__main__":
    main()
