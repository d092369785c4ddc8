"""Entry point for serving the Booking API.

Host, port and log level come from ``Settings`` (``HOST``, ``PORT``,
``LOG_LEVEL`` environment variables).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from booking_api.app.core.config import settings
from booking_api.app.main import app


async def main() -> None:
    """Serve the API with Uvicorn until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
