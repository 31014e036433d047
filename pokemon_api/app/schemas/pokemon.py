"""
Pydantic schemas for Pokémon records.

A record has a multilingual ``name`` (``english``, ``french``,
``japanese``, ``chinese``...), a list of ``type`` labels and a
``base`` mapping of stat names to numbers.  Any other field is passed
through as is.  The ``id`` is assigned by the store and can never be
set through a request body.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

# Strict types: a value of the wrong JSON type is rejected, never coerced.
Stat = Union[StrictInt, StrictFloat]

# Fields a create payload must provide.
REQUIRED_FIELDS = ("name", "type", "base")


class PokemonBase(BaseModel):
    """Known record fields; extra fields are accepted and kept."""

    model_config = ConfigDict(extra="allow")

    name: Optional[Dict[str, StrictStr]] = Field(None, description="Display name per language")
    type: Optional[List[StrictStr]] = Field(None, description="Category labels, e.g. Grass or Poison")
    base: Optional[Dict[str, Stat]] = Field(None, description="Base stats such as HP or Attack")

    def to_record(self) -> Dict[str, Any]:
        """Return the explicitly provided, non-null fields without ``id``."""
        provided = set(self.model_fields_set) | set(self.model_extra or {})
        provided.discard("id")
        return {
            key: value
            for key, value in self.model_dump().items()
            if key in provided and value is not None
        }


class PokemonCreate(PokemonBase):
    """Schema for creating a new record.

    ``name``, ``type`` and ``base`` are declared optional here so the
    service can report a missing field as ``Invalid data`` rather than
    a generic validation failure.
    """


class PokemonUpdate(PokemonBase):
    """Schema for a partial update.

    Only the fields present in the body are written; fields absent or
    ``null`` keep their current value.  Extra fields are written as
    they are.
    """


class Pagination(BaseModel):
    """Pagination metadata (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_pokemons: int = Field(..., alias="totalPokemons")
    items_per_page: int = Field(..., alias="itemsPerPage")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_previous_page: bool = Field(..., alias="hasPreviousPage")


class PokemonPage(BaseModel):
    data: List[Dict[str, Any]]
    pagination: Pagination


class SearchResult(BaseModel):
    message: str
    results: List[Dict[str, Any]]


class DeleteResult(BaseModel):
    message: str
    pokemon: Dict[str, Any]
