"""HTTP client for the PokeAPI."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from pokespeare.domain.errors import LookupParseError, LookupStatusError, LookupTransportError

if TYPE_CHECKING:
    from pydantic import JsonValue

    from pokespeare.adapters.http_resilience import ResilientClient

log = getLogger(__name__)


class PokeApiClient:
    """Fetches and parses PokeAPI documents with a single attempt per call."""

    def __init__(self, client: ResilientClient) -> None:
        self._client = client

    def pokemon_url(self, name: str) -> str:
        return f"pokemon/{quote(name, safe='')}"

    def species_url(self, name: str) -> str:
        return f"pokemon-species/{quote(name, safe='')}"

    async def fetch_json(self, url: str) -> JsonValue:
        try:
            response = await self._client.get(url)
        except httpx.DecodingError as exc:
            raise LookupParseError("Failed to decode response body", url=url) from exc
        except httpx.HTTPError as exc:
            log.debug("PokeAPI transport error for %s: %r", url, exc)
            raise LookupTransportError(f"Request to {url} failed: {exc}", url=url) from exc

        if not response.is_success:
            raise LookupStatusError(
                f"PokeAPI answered {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return json.loads(response.content)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise LookupParseError("Failed to parse JSON", url=url) from exc
