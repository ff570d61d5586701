"""FunTranslations configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .http_resilience import ResilienceConfig

FUNTRANSLATIONS_BASE_URL = "https://api.funtranslations.com/"
FUNTRANSLATIONS_TIMEOUT_SECONDS = 10.0
SHAKESPEARE_PATH = "translate/shakespeare.json"


def _default_resilience_config() -> ResilienceConfig:
    return ResilienceConfig(
        name="funtranslations",
        base_url=FUNTRANSLATIONS_BASE_URL,
        timeout_seconds=FUNTRANSLATIONS_TIMEOUT_SECONDS,
        default_headers={"Content-Type": "application/x-www-form-urlencoded"},
    )


@dataclass(frozen=True, slots=True)
class FunTranslationsConfig:
    resilience: ResilienceConfig = field(default_factory=_default_resilience_config)
    path: str = SHAKESPEARE_PATH
