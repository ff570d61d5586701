"""Public interface for the PokeAPI adapter."""

from __future__ import annotations

from .client import PokeApiClient

__all__ = ["PokeApiClient"]
