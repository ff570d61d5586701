"""Mapping from pipeline results to HTTP response bodies."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pokespeare.domain.description_pipeline import DescriptionOutcome

if TYPE_CHECKING:
    from pokespeare.domain.description_pipeline import PipelineResult

NOT_FOUND_MESSAGE = (
    "Sorry, it looks like that Pokemon doesn't exist. "
    "Please double check the spelling or try with another name."
)
SPECIES_ERROR_MESSAGE = "An error occurred while retrieving Pokémon species data."
NO_ENGLISH_DESCRIPTION_MESSAGE = "No English description found for this Pokémon."
RATE_LIMIT_NOTE = "Translation rate limit exceeded. Returning original description."
ROUTE_NOT_FOUND_MESSAGE = "Not found. Please use /pokemon/:name endpoint."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."

_ERROR_MESSAGES: dict[DescriptionOutcome, str] = {
    DescriptionOutcome.NOT_FOUND: NOT_FOUND_MESSAGE,
    DescriptionOutcome.SPECIES_ERROR: SPECIES_ERROR_MESSAGE,
    DescriptionOutcome.NO_ENGLISH_DESCRIPTION: NO_ENGLISH_DESCRIPTION_MESSAGE,
}


class DescriptionBody(BaseModel):
    name: str
    description: str
    note: str | None = None


class ErrorBody(BaseModel):
    error: str


class PrettyJSONResponse(JSONResponse):
    """JSON response rendered with two-space indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def response_body(result: PipelineResult) -> DescriptionBody | ErrorBody:
    if result.outcome is DescriptionOutcome.SUCCESS:
        return DescriptionBody(name=result.name, description=result.description or "")
    if result.outcome is DescriptionOutcome.RATE_LIMITED:
        return DescriptionBody(
            name=result.name,
            description=result.description or "",
            note=RATE_LIMIT_NOTE,
        )
    return ErrorBody(error=_ERROR_MESSAGES[result.outcome])


def map_result(result: PipelineResult) -> tuple[int, dict[str, str]]:
    """Return the status code and JSON body for a pipeline result."""

    body = response_body(result)
    return result.status_code, body.model_dump(exclude_none=True)


def error_response(message: str, *, status_code: int) -> PrettyJSONResponse:
    return PrettyJSONResponse(ErrorBody(error=message).model_dump(), status_code=status_code)
