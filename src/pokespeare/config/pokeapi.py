"""PokeAPI configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http_resilience import ResilienceConfig

POKEAPI_BASE_URL = "https://pokeapi.co/api/v2/"
POKEAPI_TIMEOUT_SECONDS = 10.0


def _default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        name="pokeapi",
        base_url=POKEAPI_BASE_URL,
        timeout_seconds=POKEAPI_TIMEOUT_SECONDS,
        default_headers={"Accept": "application/json"},
    )


@dataclass(frozen=True, slots=True)
class PokeApiConfig:
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
