"""Port for the per-sentence style translation service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, runtime_checkable


class TranslationErrorKind(StrEnum):
    RATE_LIMITED = "rate_limited"
    MALFORMED = "malformed"
    TRANSPORT = "transport"


@dataclass(frozen=True, slots=True)
class Translated:
    text: str


@dataclass(frozen=True, slots=True)
class TranslationFailed:
    kind: TranslationErrorKind
    detail: str = ""

    @property
    def rate_limited(self) -> bool:
        return self.kind is TranslationErrorKind.RATE_LIMITED


type TranslationResult = Translated | TranslationFailed


@runtime_checkable
class Translator(Protocol):
    """Rewrites a single piece of text; failures are returned, not raised."""

    async def translate(self, text: str) -> TranslationResult: ...


__all__ = [
    "Translated",
    "TranslationErrorKind",
    "TranslationFailed",
    "TranslationResult",
    "Translator",
]
