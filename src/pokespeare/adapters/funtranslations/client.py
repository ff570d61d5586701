"""HTTP client for the FunTranslations Shakespeare API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from pokespeare.domain.ports.translation import (
    Translated,
    TranslationErrorKind,
    TranslationFailed,
    TranslationResult,
)

from .schema import TranslationResponse

if TYPE_CHECKING:
    from pokespeare.adapters.http_resilience import ResilientClient
    from pokespeare.config.funtranslations import FunTranslationsConfig

log = getLogger(__name__)

RATE_LIMIT_STATUS = 429


class FunTranslationsClient:
    """Translates text one call at a time; failures come back as ``TranslationFailed``."""

    def __init__(self, client: ResilientClient, *, config: FunTranslationsConfig) -> None:
        self._client = client
        self._path = config.path

    async def translate(self, text: str) -> TranslationResult:
        try:
            response = await self._client.post(self._path, params={"text": text})
        except httpx.DecodingError as exc:
            return TranslationFailed(TranslationErrorKind.MALFORMED, str(exc))
        except httpx.HTTPError as exc:
            log.debug("FunTranslations transport error: %r", exc)
            return TranslationFailed(TranslationErrorKind.TRANSPORT, str(exc))

        # The body of a rate-limited response is not read.
        if response.status_code == RATE_LIMIT_STATUS:
            return TranslationFailed(TranslationErrorKind.RATE_LIMITED, "Rate limit exceeded")
        if not response.is_success:
            return TranslationFailed(
                TranslationErrorKind.MALFORMED,
                f"Unexpected status {response.status_code}",
            )

        try:
            payload = TranslationResponse.model_validate_json(response.content)
        except ValidationError as exc:
            return TranslationFailed(
                TranslationErrorKind.MALFORMED,
                f"Failed to parse translation response: {exc.error_count()} error(s)",
            )
        return Translated(payload.contents.translated)
