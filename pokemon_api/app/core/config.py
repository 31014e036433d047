"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration at all.  The listening port
and the page size are part of the public contract of the API and are
therefore not overridable.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Directory of the ``pokemon_api`` package; relative paths in the
# settings are resolved against it.
PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pokemon API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # JSON array of records, read once at startup and rewritten on
    # every mutation.
    data_file: str = os.getenv("DATA_FILE", "data/pokemons.json")

    # Directory served under ``/assets`` (images live in
    # ``<assets_dir>/pokemons/<id>.png``).
    assets_dir: str = os.getenv("ASSETS_DIR", "assets")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = 3000
    page_size: int = 20


def _resolve(value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return (PACKAGE_DIR / path).resolve()


def get_data_path() -> Path:
    """Return the absolute path of the backing JSON file."""
    return _resolve(settings.data_file)


def get_assets_path() -> Path:
    """Return the absolute path of the static assets directory."""
    return _resolve(settings.assets_dir)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
