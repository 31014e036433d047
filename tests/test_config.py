# =============================================================================
# tests/test_config.py - Settings and Logging Tests
# =============================================================================

import logging
from pathlib import Path

from pokemon_api.app.core import config
from pokemon_api.app.core.config import PACKAGE_DIR, Settings
from pokemon_api.app.core.logging_config import setup_logging


class TestSettings:
    def test_contract_values_are_fixed(self):
        settings = Settings()
        assert settings.port == 3000
        assert settings.page_size == 20

    def test_relative_paths_resolve_against_package(self, monkeypatch):
        monkeypatch.setattr(config.settings, "data_file", "data/pokemons.json")
        assert config.get_data_path() == PACKAGE_DIR / "data" / "pokemons.json"

    def test_absolute_paths_are_kept(self, monkeypatch, tmp_path):
        monkeypatch.setattr(config.settings, "assets_dir", str(tmp_path))
        assert config.get_assets_path() == Path(tmp_path)

    def test_bundled_data_file_exists(self):
        assert (PACKAGE_DIR / "data" / "pokemons.json").is_file()


class TestLogging:
    def test_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            assert setup_logging("debug") is root
            assert root.level == logging.DEBUG
            setup_logging("not-a-level")
            assert root.level == logging.INFO
        finally:
            root.setLevel(previous)
