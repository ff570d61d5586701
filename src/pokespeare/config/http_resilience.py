"""Configuration types for upstream HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    """Connection settings for one upstream.

    Every request is a single attempt bounded by ``timeout_seconds``.
    """

    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    default_headers: Mapping[str, str] | None = None
