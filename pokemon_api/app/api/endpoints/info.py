"""
Service information endpoints.

``GET /`` lists the available endpoints and ``GET /debug/assets``
reports where static images are served from.
"""

from typing import Any, Dict

from fastapi import APIRouter

from pokemon_api.app.core.config import get_assets_path, settings

router = APIRouter()


@router.get("/")
async def root() -> Dict[str, Any]:
    return {
        "message": f"{settings.project_name} - server is up",
        "endpoints": {
            "pokemons": "GET /api/pokemons?page=1",
            "searchPokemon": "GET /api/pokemons/search/name",
            "pokemonById": "GET /api/pokemons/:id",
            "createPokemon": "POST /api/pokemons",
            "updatePokemon": "PUT /api/pokemons/:id",
            "deletePokemon": "DELETE /api/pokemons/:id",
            "staticAssets": "GET /assets/pokemons/:id.png",
        },
    }


@router.get("/debug/assets")
async def debug_assets() -> Dict[str, Any]:
    return {
        "message": "Debug info",
        "staticPath": str(get_assets_path()),
        "imageExampleUrl": f"http://localhost:{settings.port}/assets/pokemons/1.png",
    }
