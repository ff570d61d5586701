"""Public interface for the FunTranslations adapter."""

from __future__ import annotations

from .client import FunTranslationsClient
from .schema import TranslationContents, TranslationResponse

__all__ = ["FunTranslationsClient", "TranslationContents", "TranslationResponse"]
