"""
Main entrypoint for the Pokemon API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the API routes and the static asset mount.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``, e.g.::

    uvicorn pokemon_api.app.main:app --port 3000

The record store is owned by the application (``app.state.store``).
Pass a ready store to ``create_app`` (as the tests do) or let the
lifespan hook load the file configured in ``Settings.data_file``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import get_assets_path, get_data_path, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.store import PokemonStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.store is None:
        app.state.store = PokemonStore.from_file(get_data_path())
    logger.info("Server is running on http://localhost:%s", settings.port)
    logger.info("API available at http://localhost:%s/api/pokemons", settings.port)
    yield


def create_app(store: Optional[PokemonStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PokemonStore]
        Store to serve.  When omitted, the store is loaded from the
        configured data file on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    # The directory is checked on first request, not at import time.
    app.mount("/assets", StaticFiles(directory=get_assets_path(), check_dir=False), name="assets")

    logger.info("Server is set up. Ready to start listening on a port.")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
