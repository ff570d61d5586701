"""HTTP boundary for the description service."""

from __future__ import annotations

from .app import create_app
from .responses import map_result

__all__ = ["create_app", "map_result"]
