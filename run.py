"""Entry point for the Pokemon API.

Starts the FastAPI application with Uvicorn on the fixed port 3000.
The bind address is read from the ``HOST`` environment variable
(default ``0.0.0.0``); see ``pokemon_api.app.core.config`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from pokemon_api.app.core.config import settings
from pokemon_api.app.main import app


async def main() -> None:
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
