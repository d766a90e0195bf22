"""Entry point for the User Vault API.

Starts the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example inside Docker, where you only
specify a single Python file to run.

Host, port, database location and log level are read from the
environment (``HOST``, ``PORT``, ``DATABASE_URL``, ``LOG_LEVEL``); see
``user_vault_api/app/core/config.py`` for the defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_vault_api.app.core.config import settings
from user_vault_api.app.main import app

logger = logging.getLogger("user_vault_api")


async def run_api() -> None:
    """Serve the API until the process is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logger.info("Starting server on %s:%s", settings.host, settings.port)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
