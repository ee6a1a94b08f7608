"""Entry point for the Song Library API.

Reads configuration from the environment, builds the application and
serves it with Uvicorn on ``HOST:PORT`` (``localhost:8080`` by
default).  Database settings use the ``DB_*`` variables, see
``song_library_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from song_library_api.app.core.config import Settings
from song_library_api.app.main import create_app


async def main() -> None:
    """Build the app from the environment and serve it until stopped."""
    settings = Settings.from_env()
    app = create_app(settings)
    logging.getLogger(__name__).info("Run server on %s:%s", settings.host, settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, access_log=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
