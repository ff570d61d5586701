"""FastAPI application exposing ``GET /pokemon/{name}``."""

from __future__ import annotations

from contextlib import AsyncExitStack, asynccontextmanager
from logging import getLogger
from typing import TYPE_CHECKING, Annotated

from fastapi import APIRouter, Depends, FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from pokespeare import __version__
from pokespeare.adapters.funtranslations import FunTranslationsClient
from pokespeare.adapters.http_resilience import ResilientClient
from pokespeare.adapters.pokeapi import PokeApiClient
from pokespeare.config import AppConfig
from pokespeare.domain.description_pipeline import DescribePokemon

from .responses import (
    ROUTE_NOT_FOUND_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    PrettyJSONResponse,
    error_response,
    map_result,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from pokespeare.adapters.http_resilience import ClientFactory

log = getLogger(__name__)

_ROUTE_MISS_STATUSES = frozenset({404, 405})

router = APIRouter()


def get_describe_pokemon(request: Request) -> DescribePokemon:
    return request.app.state.describe_pokemon


@router.get("/pokemon/{name}")
async def describe_pokemon(
    name: str,
    describe: Annotated[DescribePokemon, Depends(get_describe_pokemon)],
) -> PrettyJSONResponse:
    result = await describe(name)
    status_code, body = map_result(result)
    return PrettyJSONResponse(body, status_code=status_code)


def create_app(
    config: AppConfig | None = None,
    *,
    client_factory: ClientFactory = ResilientClient,
) -> FastAPI:
    """Build the application; upstream HTTP clients live as long as the app does."""

    effective_config = config or AppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            pokeapi_http = await stack.enter_async_context(
                client_factory(effective_config.pokeapi.resilience)
            )
            translator_http = await stack.enter_async_context(
                client_factory(effective_config.funtranslations.resilience)
            )
            app.state.describe_pokemon = DescribePokemon(
                lookup=PokeApiClient(pokeapi_http),
                translator=FunTranslationsClient(
                    translator_http,
                    config=effective_config.funtranslations,
                ),
            )
            log.info("Server is running on port %s", effective_config.server.port)
            yield

    app = FastAPI(
        title="Pokespeare",
        version=__version__,
        lifespan=lifespan,
        default_response_class=PrettyJSONResponse,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.include_router(router)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _: Request, exc: StarletteHTTPException
    ) -> PrettyJSONResponse:
        if exc.status_code in _ROUTE_MISS_STATUSES:
            return error_response(ROUTE_NOT_FOUND_MESSAGE, status_code=404)
        return error_response(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> PrettyJSONResponse:
        log.exception("Unhandled error serving %s", request.url.path, exc_info=exc)
        return error_response(UNEXPECTED_ERROR_MESSAGE, status_code=500)

    return app
