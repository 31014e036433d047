"""
FastAPI dependencies shared by the endpoint modules.

The record store is owned by the application (``app.state.store``)
and handed to each request through ``Depends`` instead of living in a
module-level global.
"""

from typing import Annotated

from fastapi import Depends, Request

from pokemon_api.app.core.store import PokemonStore
from pokemon_api.app.services.pokemon_service import PokemonService


def get_store(request: Request) -> PokemonStore:
    """Return the store attached to the running application."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Record store is not initialised")
    return store


def get_pokemon_service(store: PokemonStore = Depends(get_store)) -> PokemonService:
    return PokemonService(store)


PokemonServiceDep = Annotated[PokemonService, Depends(get_pokemon_service)]
