"""HTTP server configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_int
from .errors import ConfigurationError
from .funtranslations import FunTranslationsConfig
from .pokeapi import PokeApiConfig

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 3000
_MAX_PORT = 65535


@dataclass(frozen=True, slots=True)
class ServerConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    def __post_init__(self) -> None:
        if not 0 < self.port <= _MAX_PORT:
            raise ConfigurationError(f"Port must be between 1 and {_MAX_PORT}, got {self.port}")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Everything the service needs to start, passed explicitly to the server."""

    server: ServerConfig = field(default_factory=ServerConfig)
    pokeapi: PokeApiConfig = field(default_factory=PokeApiConfig)
    funtranslations: FunTranslationsConfig = field(default_factory=FunTranslationsConfig)


def get_server_config(*, host: str = DEFAULT_HOST) -> ServerConfig:
    return ServerConfig(host=host, port=optional_env_int("PORT", default=DEFAULT_PORT))


def get_app_config(*, server: ServerConfig | None = None) -> AppConfig:
    return AppConfig(server=server or get_server_config())
