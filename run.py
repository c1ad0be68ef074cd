"""Entry point for the Customer API.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the MongoDB connection string, listener host and
port is read from environment variables (``MONGO_URL``, ``HOST``,
``PORT``; see ``customer_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port come from ``settings``.  Defaults are ``0.0.0.0`` and
    ``8080``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Logging is configured by ``setup_logging`` in ``create_app``.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Customer API stopped")


if __name__ == "__main__":
    main()
