"""Entry point for the Tasks API server.

Serves ``tasks_api.app.main:app`` with Uvicorn.  Host, port and log
level come from the environment variables read by
``tasks_api.app.core.config`` (``HOST``, ``PORT``, ``LOG_LEVEL``);
by default the server listens on ``0.0.0.0:8080``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from tasks_api.app.core.config import settings
from tasks_api.app.core.logging_config import setup_logging


async def run_api() -> None:
    """Start the API using Uvicorn and block until it stops."""
    config = Config(
        app="tasks_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    setup_logging(settings)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
