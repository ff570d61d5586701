"""Domain port definitions for adapters."""

from __future__ import annotations

from .lookup import PokemonLookup
from .translation import (
    Translated,
    TranslationErrorKind,
    TranslationFailed,
    TranslationResult,
    Translator,
)

__all__ = [
    "PokemonLookup",
    "Translated",
    "TranslationErrorKind",
    "TranslationFailed",
    "TranslationResult",
    "Translator",
]
