"""Fetch a ``/words`` URL and decode the JSON array it returns."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Tuple, Union

import httpx

from .config import Settings, load_settings
from .models import (
    DecodeErrorKind,
    DecodeFailure,
    HttpStatusFailure,
    SearchOutcome,
    SearchSuccess,
    TransportFailure,
    WordResult,
)

LOGGER = logging.getLogger(__name__)


class DecodeError(ValueError):
    """Raised when a response body does not match the result schema."""

    def __init__(self, kind: DecodeErrorKind, detail: str):
        super().__init__(f"{kind.value}: {detail}")
        self.kind = kind
        self.detail = detail


def decode_words(body: Union[str, bytes]) -> List[WordResult]:
    """Decode a response body into results, all or nothing."""

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(DecodeErrorKind.OTHER, f"body is not UTF-8: {exc}") from None
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise DecodeError(DecodeErrorKind.CORRUPTED_DATA, f"invalid JSON: {exc}") from None
    if not isinstance(payload, list):
        raise DecodeError(
            DecodeErrorKind.CORRUPTED_DATA,
            f"expected an array, got {type(payload).__name__}",
        )
    return [_decode_entry(index, entry) for index, entry in enumerate(payload)]


def _decode_entry(index: int, entry: Any) -> WordResult:
    if not isinstance(entry, dict):
        raise DecodeError(
            DecodeErrorKind.TYPE_MISMATCH,
            f"[{index}]: expected an object, got {type(entry).__name__}",
        )
    if "word" not in entry:
        raise DecodeError(DecodeErrorKind.MISSING_KEY, f"[{index}]: key 'word' not found")
    word = entry["word"]
    if word is None:
        raise DecodeError(DecodeErrorKind.MISSING_VALUE, f"[{index}].word: value is null")
    if not isinstance(word, str):
        raise DecodeError(
            DecodeErrorKind.TYPE_MISMATCH,
            f"[{index}].word: expected a string, got {type(word).__name__}",
        )
    return WordResult(
        word=word,
        score=_optional_int(index, entry, "score"),
        num_syllables=_optional_int(index, entry, "numSyllables"),
        defs=_optional_strings(index, entry, "defs"),
        tags=_optional_strings(index, entry, "tags"),
    )


def _optional_int(index: int, entry: dict, key: str) -> Optional[int]:
    value = entry.get(key)
    if value is None:
        return None
    # bool is an int subclass but never a valid score
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(
            DecodeErrorKind.TYPE_MISMATCH,
            f"[{index}].{key}: expected an integer, got {type(value).__name__}",
        )
    return value


def _optional_strings(index: int, entry: dict, key: str) -> Optional[Tuple[str, ...]]:
    value = entry.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DecodeError(
            DecodeErrorKind.TYPE_MISMATCH,
            f"[{index}].{key}: expected an array, got {type(value).__name__}",
        )
    for position, item in enumerate(value):
        if not isinstance(item, str):
            raise DecodeError(
                DecodeErrorKind.TYPE_MISMATCH,
                f"[{index}].{key}[{position}]: expected a string, got {type(item).__name__}",
            )
    return tuple(value)


class DatamuseClient:
    """Async client issuing one GET per search.

    Every call to :meth:`fetch` returns a :class:`SearchOutcome`; transport
    errors, non-2xx statuses and undecodable bodies become failure values
    rather than exceptions.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or load_settings()
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=self.settings.timeout)

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    async def __aenter__(self) -> "DatamuseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def fetch(self, url: str) -> SearchOutcome:
        LOGGER.debug("GET %s", url)
        try:
            response = await self.http_client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            LOGGER.warning("Request to %s failed: %s", url, exc)
            return TransportFailure(url=url, reason=str(exc) or type(exc).__name__)

        if not 200 <= response.status_code <= 299:
            LOGGER.warning("Request to %s returned HTTP %s", url, response.status_code)
            return HttpStatusFailure(url=url, status_code=response.status_code)

        try:
            words = decode_words(response.content)
        except DecodeError as exc:
            LOGGER.error("Could not decode response from %s (%s): %s", url, exc.kind.value, exc.detail)
            return DecodeFailure(url=url, kind=exc.kind, detail=exc.detail)

        LOGGER.debug("Decoded %s results", len(words))
        return SearchSuccess(url=url, results=tuple(words))
