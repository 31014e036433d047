"""
Error types raised by the service layer and their HTTP handlers.

Every error carries a human readable ``message`` and the HTTP status
it maps to.  The handlers registered by ``register_exception_handlers``
render them as ``{"message": ...}`` bodies, optionally extended with
error specific fields (the search miss also returns ``results: []``).
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class PokemonAPIError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        body.update(self.extra)
        return body


class InvalidPageError(PokemonAPIError):
    """Raised when a page past the end of a non‑empty collection is requested."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, page: int, total_pages: int):
        super().__init__(f"Page {page} does not exist. Total pages: {total_pages}")
        self.page = page
        self.total_pages = total_pages


class PokemonNotFoundError(PokemonAPIError):
    """Raised when no record has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, pokemon_id: Optional[int]):
        super().__init__("Pokémon not found")
        self.pokemon_id = pokemon_id


class NoSearchResultsError(PokemonAPIError):
    """Raised when a name search matches nothing."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, query: str):
        super().__init__(f"No Pokémon found with name: {query}", {"results": []})
        self.query = query


class InvalidPokemonError(PokemonAPIError):
    """Raised when a create payload lacks one of the required fields."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, missing: List[str]):
        super().__init__("Invalid data", {"missing": missing})
        self.missing = missing


async def pokemon_api_error_handler(request: Request, exc: PokemonAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as 400 ``Invalid data``."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error while handling %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.add_exception_handler(PokemonAPIError, pokemon_api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
