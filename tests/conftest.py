# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures: a 25-record collection written to a temporary JSON file,
# the store and service built on it, and a TestClient for the application.
# =============================================================================

import json

import pytest
from fastapi.testclient import TestClient

from pokemon_api.app.core.store import PokemonStore
from pokemon_api.app.main import create_app
from pokemon_api.app.services.pokemon_service import PokemonService


def make_pokemon(pokemon_id: int) -> dict:
    """Build a record whose names are unique per id."""
    return {
        "id": pokemon_id,
        "name": {
            "english": f"Mon{pokemon_id:03d}",
            "french": f"Monstre{pokemon_id:03d}",
            "japanese": f"モン{pokemon_id:03d}",
            "chinese": f"怪兽{pokemon_id:03d}",
        },
        "type": ["Normal"],
        "base": {"HP": 40 + pokemon_id, "Attack": 50, "Defense": 50, "Speed": 45},
    }


@pytest.fixture
def records():
    return [make_pokemon(i) for i in range(1, 26)]


@pytest.fixture
def data_file(tmp_path, records):
    path = tmp_path / "pokemons.json"
    path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def store(data_file):
    return PokemonStore.from_file(data_file)


@pytest.fixture
def service(store):
    return PokemonService(store)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def new_pokemon():
    return {
        "name": {
            "english": "Pikachu",
            "french": "Pikachu",
            "japanese": "ピカチュウ",
            "chinese": "皮卡丘",
        },
        "type": ["Electric"],
        "base": {"HP": 35, "Attack": 55, "Defense": 40, "Speed": 90},
    }


def read_file(path):
    """Parse the backing file as it is on disk."""
    return json.loads(path.read_text(encoding="utf-8"))
