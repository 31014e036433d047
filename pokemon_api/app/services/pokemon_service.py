"""
Service layer for Pokémon records.

``PokemonService`` answers queries against, and applies mutations to,
the records held by a ``PokemonStore``.  Reads are served from memory;
every successful create, update or delete rewrites the backing file
before returning.  Failures are reported by raising the errors from
``core.errors`` which the API layer turns into 4xx responses.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, Optional

from pokemon_api.app.core.config import settings
from pokemon_api.app.core.errors import (
    InvalidPageError,
    InvalidPokemonError,
    NoSearchResultsError,
    PokemonNotFoundError,
)
from pokemon_api.app.core.store import PokemonStore, Record
from pokemon_api.app.schemas.pokemon import (
    REQUIRED_FIELDS,
    Pagination,
    PokemonCreate,
    PokemonPage,
    PokemonUpdate,
    SearchResult,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``raw`` (``"2abc"`` gives 2).

    Returns ``None`` when ``raw`` does not start with a number.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))


def parse_page(raw: Optional[str]) -> int:
    """Turn a ``page`` query value into a page number.

    Missing or non-numeric values, and values below 1, become 1.
    """
    page = parse_int(raw)
    if page is None or page < 1:
        return 1
    return page


class PokemonService:
    """CRUD operations over an injected ``PokemonStore``."""

    def __init__(self, store: PokemonStore, page_size: int = settings.page_size):
        self.store = store
        self.page_size = page_size

    def list_pokemons(self, page: int = 1) -> PokemonPage:
        """Return one page of records together with pagination metadata.

        Raises ``InvalidPageError`` when ``page`` is past the last page
        of a non-empty collection.
        """
        total = len(self.store)
        total_pages = math.ceil(total / self.page_size)
        if page > total_pages and total_pages > 0:
            raise InvalidPageError(page, total_pages)

        start = (page - 1) * self.page_size
        items = self.store.records[start:start + self.page_size]
        pagination = Pagination(
            current_page=page,
            total_pages=total_pages,
            total_pokemons=total,
            items_per_page=self.page_size,
            has_next_page=page < total_pages,
            has_previous_page=page > 1,
        )
        return PokemonPage(data=items, pagination=pagination)

    def search(self, query: str) -> SearchResult:
        """Find records whose name contains ``query`` in any language.

        Matching is a case-insensitive substring test; results keep
        store order.
        """
        needle = query.lower()
        results = [record for record in self.store if _name_matches(record, needle)]
        if not results:
            raise NoSearchResultsError(query)
        return SearchResult(message=f"{len(results)} Pokémon(s) found", results=results)

    def get(self, pokemon_id: Optional[int]) -> Record:
        record = self.store.find(pokemon_id) if pokemon_id is not None else None
        if record is None:
            raise PokemonNotFoundError(pokemon_id)
        return record

    def create(self, data: PokemonCreate) -> Record:
        """Append a new record with a freshly assigned id and persist."""
        record = data.to_record()
        missing = [field for field in REQUIRED_FIELDS if field not in record]
        if missing:
            raise InvalidPokemonError(missing)

        record["id"] = self.store.next_id()
        self.store.append(record)
        self.store.save()
        logger.info("Created Pokémon %s", record["id"])
        return record

    def update(self, pokemon_id: Optional[int], data: PokemonUpdate) -> Record:
        """Write the provided fields onto an existing record and persist.

        The record's ``id`` is never changed.
        """
        record = self.get(pokemon_id)
        changes = data.to_record()
        for field, value in changes.items():
            record[field] = value
        self.store.save()
        logger.info("Updated Pokémon %s (%s)", record["id"], ", ".join(sorted(changes)) or "no fields")
        return record

    def delete(self, pokemon_id: Optional[int]) -> Record:
        """Remove the first record with ``pokemon_id``, persist and return it."""
        index = self.store.index_of(pokemon_id) if pokemon_id is not None else None
        if index is None:
            raise PokemonNotFoundError(pokemon_id)
        record = self.store.remove_at(index)
        self.store.save()
        logger.info("Deleted Pokémon %s", pokemon_id)
        return record


def _name_matches(record: Record, needle: str) -> bool:
    names: Dict[str, Any] = record.get("name") or {}
    if not isinstance(names, dict):
        return False
    return any(isinstance(value, str) and needle in value.lower() for value in names.values())
