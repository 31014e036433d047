"""
Pokemon API: a small REST service over a JSON collection of Pokémon.

The web application lives in ``pokemon_api.app``.  This directory
also ships the default backing file (``data/pokemons.json``) and the
static images served under ``/assets`` (``assets/pokemons/<id>.png``);
both locations can be overridden through ``DATA_FILE`` and
``ASSETS_DIR``.
"""
