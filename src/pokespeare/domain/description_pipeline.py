"""Application service turning a Pokémon name into a Shakespearean description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from pokespeare.domain.errors import FetchError
from pokespeare.domain.ports.translation import Translated
from pokespeare.domain.sentences import clean_description, split_sentences
from pokespeare.domain.species import ENGLISH, SpeciesPayload, first_entry_for_language

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pokespeare.domain.ports.lookup import PokemonLookup
    from pokespeare.domain.ports.translation import Translator

log = getLogger(__name__)


class DescriptionOutcome(StrEnum):
    """Terminal state of a single description request."""

    SUCCESS = "success"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    SPECIES_ERROR = "species_error"
    NO_ENGLISH_DESCRIPTION = "no_english_description"


_STATUS_CODES: dict[DescriptionOutcome, int] = {
    DescriptionOutcome.SUCCESS: 200,
    DescriptionOutcome.RATE_LIMITED: 429,
    DescriptionOutcome.NOT_FOUND: 404,
    DescriptionOutcome.SPECIES_ERROR: 500,
    DescriptionOutcome.NO_ENGLISH_DESCRIPTION: 500,
}


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Outcome of one pipeline run; ``description`` is set only when one was produced."""

    name: str
    outcome: DescriptionOutcome
    description: str | None = None

    @property
    def degraded(self) -> bool:
        return self.outcome is DescriptionOutcome.RATE_LIMITED

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.outcome]


@dataclass(frozen=True, slots=True)
class TranslationBatch:
    """Sentences produced by a translation run, in input order."""

    sentences: tuple[str, ...]
    rate_limited: bool = False
    fallbacks: int = 0


async def translate_sentences(
    sentences: Iterable[str],
    translator: Translator,
) -> TranslationBatch:
    """Translate sentences one at a time, stopping at the first rate limit.

    A sentence whose translation fails for any other reason is kept as is.
    """

    translated: list[str] = []
    fallbacks = 0
    for sentence in sentences:
        result = await translator.translate(sentence)
        if isinstance(result, Translated):
            translated.append(result.text)
            continue
        if result.rate_limited:
            return TranslationBatch(tuple(translated), rate_limited=True, fallbacks=fallbacks)
        log.warning("Keeping sentence untranslated (%s): %s", result.kind, result.detail)
        translated.append(sentence)
        fallbacks += 1
    return TranslationBatch(tuple(translated), fallbacks=fallbacks)


@dataclass(frozen=True, slots=True)
class DescribePokemon:
    """Existence check, species lookup, sentence split, then sequential translation."""

    lookup: PokemonLookup
    translator: Translator
    language: str = ENGLISH

    async def __call__(self, name: str) -> PipelineResult:
        subject = name.lower()

        if not await self._exists(subject):
            return PipelineResult(name=subject, outcome=DescriptionOutcome.NOT_FOUND)

        try:
            species = await self._fetch_species(subject)
        except (FetchError, ValidationError) as exc:
            log.error("Error retrieving species data for %s: %s", subject, exc)
            return PipelineResult(name=subject, outcome=DescriptionOutcome.SPECIES_ERROR)

        entry = first_entry_for_language(species.flavor_text_entries, self.language)
        if entry is None:
            log.error("No %r flavor text for %s", self.language, subject)
            return PipelineResult(name=subject, outcome=DescriptionOutcome.NO_ENGLISH_DESCRIPTION)

        cleaned = clean_description(entry.flavor_text)
        sentences = split_sentences(cleaned)
        batch = await translate_sentences(sentences, self.translator)

        if batch.rate_limited:
            log.warning(
                "Translation rate limit hit for %s after %s of %s sentences",
                subject,
                len(batch.sentences),
                len(sentences),
            )
            return PipelineResult(
                name=subject,
                outcome=DescriptionOutcome.RATE_LIMITED,
                description=cleaned,
            )

        log.info(
            "Described %s: sentences=%s, untranslated=%s",
            subject,
            len(sentences),
            batch.fallbacks,
        )
        return PipelineResult(
            name=subject,
            outcome=DescriptionOutcome.SUCCESS,
            description=" ".join(batch.sentences),
        )

    async def _exists(self, subject: str) -> bool:
        try:
            await self.lookup.fetch_json(self.lookup.pokemon_url(subject))
        except FetchError as exc:
            log.warning("Existence check failed for %s: %s", subject, exc)
            return False
        return True

    async def _fetch_species(self, subject: str) -> SpeciesPayload:
        payload = await self.lookup.fetch_json(self.lookup.species_url(subject))
        return SpeciesPayload.model_validate(payload)
