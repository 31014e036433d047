"""
Top‑level API router.

Aggregates the domain routers.  The Pokémon routes live under
``/api/pokemons``; the informational routes sit at the root.
"""

from fastapi import APIRouter

from .endpoints import info, pokemons

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(pokemons.router, prefix="/api/pokemons", tags=["pokemons"])
