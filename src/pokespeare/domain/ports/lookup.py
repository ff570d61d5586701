"""Port for fetching JSON documents from the lookup service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pydantic import JsonValue


@runtime_checkable
class PokemonLookup(Protocol):
    """Read-only JSON lookup against the Pokémon data service.

    ``fetch_json`` raises :class:`~pokespeare.domain.errors.FetchError` subclasses
    and never retries.
    """

    def pokemon_url(self, name: str) -> str: ...

    def species_url(self, name: str) -> str: ...

    async def fetch_json(self, url: str) -> JsonValue: ...


__all__ = ["PokemonLookup"]
