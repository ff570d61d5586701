"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_int
from .errors import ConfigurationError
from .funtranslations import FunTranslationsConfig
from .http_resilience import ResilienceConfig
from .logging import configure_logging
from .pokeapi import PokeApiConfig
from .server import AppConfig, ServerConfig, get_app_config, get_server_config

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "FunTranslationsConfig",
    "PokeApiConfig",
    "ResilienceConfig",
    "ServerConfig",
    "configure_logging",
    "get_app_config",
    "get_server_config",
    "optional_env_int",
]
