"""Serve the Users API with Uvicorn.

Host, port and log level come from :mod:`users_api.app.core.config`,
so the usual environment variables (``HOST``, ``PORT``, ``LOG_LEVEL``)
apply.  Used by ``run.py`` at the project root and by
``python -m users_api``.
"""

import asyncio

from uvicorn import Config, Server

from users_api.app.core.config import settings


async def run_api() -> None:
    """Start the API using Uvicorn and wait until it shuts down."""
    config = Config(
        app="users_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
