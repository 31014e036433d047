# =============================================================================
# tests/test_store.py - JSON Record Store Tests
# =============================================================================

import json

import pytest

from pokemon_api.app.core.store import PokemonStore

from .conftest import make_pokemon, read_file


class TestLoad:
    """Tests for reading the backing file."""

    def test_loads_records_in_file_order(self, store, records):
        assert len(store) == 25
        assert [r["id"] for r in store] == [r["id"] for r in records]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PokemonStore.from_file(tmp_path / "nope.json")

    def test_non_array_rejected(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(ValueError):
            PokemonStore.from_file(path)

    @pytest.mark.parametrize("bad_id", ['"7"', "null", "true", "1.5"])
    def test_non_integer_id_rejected(self, tmp_path, bad_id):
        path = tmp_path / "ids.json"
        path.write_text(f'[{{"id": 1}}, {{"id": {bad_id}}}]', encoding="utf-8")
        with pytest.raises(ValueError, match="entry 1"):
            PokemonStore.from_file(path)

    def test_non_object_entry_rejected(self, tmp_path):
        path = tmp_path / "scalars.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="entry 0"):
            PokemonStore.from_file(path)

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            PokemonStore.from_file(path)


class TestNextId:
    """Tests for id assignment."""

    def test_empty_store_starts_at_one(self, tmp_path):
        assert PokemonStore(tmp_path / "empty.json").next_id() == 1

    def test_max_plus_one(self, store):
        assert store.next_id() == 26

    def test_uses_max_not_length(self, tmp_path):
        store = PokemonStore(tmp_path / "x.json", [make_pokemon(3), make_pokemon(10)])
        assert store.next_id() == 11


class TestLookup:
    def test_find_and_index_of(self, store):
        assert store.find(7)["name"]["english"] == "Mon007"
        assert store.index_of(7) == 6

    def test_find_missing(self, store):
        assert store.find(999) is None
        assert store.index_of(999) is None


class TestSave:
    """Tests for writing the backing file."""

    def test_save_round_trips(self, store, data_file):
        store.remove_at(0)
        store.append(make_pokemon(30))
        store.save()
        assert read_file(data_file) == store.records

    def test_save_uses_two_space_indent_and_keeps_unicode(self, store, data_file):
        store.save()
        text = data_file.read_text(encoding="utf-8")
        assert '\n  {\n    "id": 1,' in text
        assert "モン001" in text

    def test_save_leaves_no_temp_files(self, store, data_file):
        store.save()
        assert [p.name for p in data_file.parent.iterdir()] == ["pokemons.json"]

    def test_save_creates_missing_file(self, tmp_path):
        path = tmp_path / "sub" / "new.json"
        store = PokemonStore(path, [make_pokemon(1)])
        store.save()
        assert read_file(path) == [make_pokemon(1)]
