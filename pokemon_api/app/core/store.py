"""
JSON file backed record store.

The store keeps the whole collection in memory as an ordered list of
dictionaries.  The backing file is read once when the store is
loaded; afterwards the in-memory list is the source of truth and
``save`` rewrites the file in full so that it mirrors the list.

Writes go to a temporary file in the same directory which is then
renamed over the target, so a crash never leaves a truncated file
behind.  There is no locking: the service handles one request at a
time and callers are expected to call ``save`` after each mutation.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class PokemonStore:
    """In-memory list of records mirrored to a JSON file."""

    def __init__(self, path: Union[str, Path], records: Optional[List[Record]] = None):
        self.path = Path(path)
        self.records: List[Record] = records if records is not None else []

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "PokemonStore":
        """Create a store and load its contents from ``path``."""
        store = cls(path)
        store.load()
        return store

    def load(self) -> None:
        """Replace the in-memory records with the contents of the file.

        Missing files and malformed JSON propagate as
        ``FileNotFoundError`` / ``json.JSONDecodeError``.  A file that is
        not an array of objects each carrying an integer ``id`` raises
        ``ValueError`` and leaves the current records untouched.
        """
        with self.path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{self.path} must contain a JSON array, got {type(data).__name__}")
        for position, record in enumerate(data):
            if not isinstance(record, dict):
                raise ValueError(f"{self.path}: entry {position} is not a JSON object")
            record_id = record.get("id")
            # bool is a subclass of int but never a valid id.
            if not isinstance(record_id, int) or isinstance(record_id, bool):
                raise ValueError(f"{self.path}: entry {position} has no integer id ({record_id!r})")
        self.records = data
        logger.info("Loaded %d records from %s", len(self.records), self.path)

    def save(self) -> None:
        """Serialize the whole collection back to the backing file."""
        payload = json.dumps(self.records, indent=2, ensure_ascii=False)
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            # Drop the partial temp file, then let the error surface.
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Wrote %d records to %s", len(self.records), self.path)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def next_id(self) -> int:
        """Return ``max(id) + 1``, or ``1`` for an empty store."""
        if not self.records:
            return 1
        return max(record["id"] for record in self.records) + 1

    def index_of(self, pokemon_id: int) -> Optional[int]:
        """Return the position of the first record with ``pokemon_id``."""
        for index, record in enumerate(self.records):
            if record.get("id") == pokemon_id:
                return index
        return None

    def find(self, pokemon_id: int) -> Optional[Record]:
        index = self.index_of(pokemon_id)
        if index is None:
            return None
        return self.records[index]

    def append(self, record: Record) -> None:
        self.records.append(record)

    def remove_at(self, index: int) -> Record:
        return self.records.pop(index)
