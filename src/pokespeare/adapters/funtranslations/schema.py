"""Pydantic models describing the FunTranslations API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FunTranslationsBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TranslationContents(FunTranslationsBaseModel):
    translated: str
    text: str | None = None
    translation: str | None = None


class TranslationResponse(FunTranslationsBaseModel):
    contents: TranslationContents
