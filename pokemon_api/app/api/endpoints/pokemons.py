"""
Pokémon endpoints.

These routes expose a CRUD API over the record store: a paginated
listing (20 records per page), a name search across all languages,
lookup by id, and create/update/delete.  Every mutation is written
back to the JSON file before the response is sent.

The search route is declared before ``/{pokemon_id}`` so that
``/search/...`` is never taken for an id.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from pokemon_api.app.api.deps import PokemonServiceDep
from pokemon_api.app.schemas.pokemon import (
    DeleteResult,
    PokemonCreate,
    PokemonPage,
    PokemonUpdate,
    SearchResult,
)
from pokemon_api.app.services.pokemon_service import parse_int, parse_page

router = APIRouter()


@router.get("", response_model=PokemonPage)
async def list_pokemons(
    service: PokemonServiceDep,
    page: Optional[str] = Query(None, description="Page number, starting at 1"),
) -> PokemonPage:
    """Return one page of Pokémon.

    A missing or non-numeric ``page`` defaults to 1.  Requesting a
    page past the end returns HTTP 400.
    """
    return service.list_pokemons(parse_page(page))


@router.get("/search/{name}", response_model=SearchResult)
async def search_pokemons(name: str, service: PokemonServiceDep) -> SearchResult:
    """Case-insensitive substring search on every language of ``name``.

    Returns HTTP 404 with an empty ``results`` list when nothing matches.
    """
    return service.search(name)


@router.get("/{pokemon_id}")
async def get_pokemon(pokemon_id: str, service: PokemonServiceDep) -> Dict[str, Any]:
    """Retrieve a single Pokémon by id, or HTTP 404."""
    return service.get(parse_int(pokemon_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_pokemon(pokemon_in: PokemonCreate, service: PokemonServiceDep) -> Dict[str, Any]:
    """Create a Pokémon; ``name``, ``type`` and ``base`` are required."""
    return service.create(pokemon_in)


async def existing_pokemon_id(pokemon_id: str, service: PokemonServiceDep) -> int:
    """Resolve the path id of an existing Pokémon, or raise 404.

    Dependencies run before the request body is validated, so an
    unknown id is reported as 404 even when the body is malformed.
    """
    parsed = parse_int(pokemon_id)
    service.get(parsed)
    return parsed


@router.put("/{pokemon_id}")
async def update_pokemon(
    service: PokemonServiceDep,
    existing_id: int = Depends(existing_pokemon_id),
    pokemon_in: Optional[PokemonUpdate] = Body(None),
) -> Dict[str, Any]:
    """Overwrite the given fields of an existing Pokémon.

    A request without a body leaves the record unchanged.
    """
    return service.update(existing_id, pokemon_in or PokemonUpdate())


@router.delete("/{pokemon_id}", response_model=DeleteResult)
async def delete_pokemon(pokemon_id: str, service: PokemonServiceDep) -> DeleteResult:
    """Delete a Pokémon and return the removed record."""
    pokemon = service.delete(parse_int(pokemon_id))
    return DeleteResult(message="Pokémon deleted", pokemon=pokemon)
