from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx

from pokespeare.adapters.funtranslations import FunTranslationsClient
from pokespeare.config.funtranslations import FunTranslationsConfig
from pokespeare.domain.ports.translation import (
    Translated,
    TranslationErrorKind,
    TranslationFailed,
    Translator,
)
from tests.helpers.http import make_client

if TYPE_CHECKING:
    from collections.abc import Callable


def _translator(
    handler: Callable[[httpx.Request], httpx.Response],
) -> FunTranslationsClient:
    return FunTranslationsClient(
        make_client(handler, base_url="https://translations.test/"),
        config=FunTranslationsConfig(),
    )


def test_translate_returns_translated_contents() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "success": {"total": 1},
                "contents": {
                    "translated": "To beest, or not to beest",
                    "text": "To be or not to be",
                    "translation": "shakespeare",
                },
            },
        )

    result = asyncio.run(_translator(handler).translate("To be or not to be"))

    assert result == Translated("To beest, or not to beest")
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/translate/shakespeare.json"
    assert seen[0].url.params["text"] == "To be or not to be"


def test_rate_limit_is_reported_without_reading_body() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(429, text="")

    result = asyncio.run(_translator(handler).translate("text"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.RATE_LIMITED
    assert result.rate_limited is True


def test_rate_limit_with_error_document_is_still_rate_limited() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(
            429,
            json={
                "error": {
                    "code": 429,
                    "message": "Too Many Requests: Rate limit of 5 requests per hour exceeded.",
                }
            },
        )

    result = asyncio.run(_translator(handler).translate("text"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.RATE_LIMITED


def test_invalid_json_is_malformed() -> None:
    result = asyncio.run(_translator(lambda _: httpx.Response(200, text="<html>")).translate("x"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.MALFORMED
    assert result.rate_limited is False


def test_missing_translated_field_is_malformed() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"contents": {"text": "x"}})

    result = asyncio.run(_translator(handler).translate("x"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.MALFORMED


def test_server_error_is_malformed() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": {"code": 500, "message": "boom"}})

    result = asyncio.run(_translator(handler).translate("x"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.MALFORMED
    assert "500" in result.detail


def test_undecodable_body_is_malformed() -> None:
    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, content=b"junk")

    result = asyncio.run(_translator(handler).translate("x"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.MALFORMED


def test_connection_failure_is_transport() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    result = asyncio.run(_translator(handler).translate("x"))

    assert isinstance(result, TranslationFailed)
    assert result.kind is TranslationErrorKind.TRANSPORT


def test_client_satisfies_translator_port() -> None:
    assert isinstance(_translator(lambda _: httpx.Response(200, json={})), Translator)
