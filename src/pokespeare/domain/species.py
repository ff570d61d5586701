"""Pydantic models describing the species payload and flavor text selection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable

ENGLISH = "en"


class SpeciesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class NamedResource(SpeciesBaseModel):
    name: str
    url: str | None = None


class FlavorTextEntry(SpeciesBaseModel):
    flavor_text: str
    language: NamedResource
    version: NamedResource | None = None


class SpeciesPayload(SpeciesBaseModel):
    name: str | None = None
    flavor_text_entries: list[FlavorTextEntry]


def first_entry_for_language(
    entries: Iterable[FlavorTextEntry],
    language: str = ENGLISH,
) -> FlavorTextEntry | None:
    """Return the first entry in upstream order whose language matches."""

    for entry in entries:
        if entry.language.name == language:
            return entry
    return None
