"""
HTTP client for WordsAPI (RapidAPI).

Implements the LookupProvider protocol: fetch(word) returns the raw
{"found": ..., "meanings": [...]} mapping consumed by normalize().
"""

import logging
from contextlib import contextmanager
from typing import Iterator
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field

from wordfinder.core.config import Settings, load_settings
from wordfinder.core.errors import MalformedResponseError, ProviderConfigError, ProviderError
from wordfinder.core.provider import InMemoryProvider, LookupProvider

logger = logging.getLogger(__name__)


# === Payload models ===

class WordsApiResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    definition: str | None = None
    part_of_speech: str | None = Field(default=None, alias="partOfSpeech")
    synonyms: list[str] = []
    also: list[str] = []
    antonyms: list[str] = []
    similar_to: list[str] = Field(default=[], alias="similarTo")


class WordsApiWord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    word: str | None = None
    results: list[WordsApiResult] = []


class WordsApiRhymes(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # {"all": [...]} or one list per part of speech
    rhymes: dict[str, list[str]] = {}


# === Provider ===

class WordsApiProvider:
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._client = httpx.Client(
            base_url=settings.base_url,
            headers={
                "X-RapidAPI-Key": settings.api_key,
                "X-RapidAPI-Host": settings.host,
            },
            timeout=settings.timeout,
            transport=transport,
        )

    def __enter__(self) -> "WordsApiProvider":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str) -> httpx.Response:
        try:
            r = self._client.get(path)
        except httpx.HTTPError as e:
            raise ProviderError(f"request to {path} failed: {e}") from e

        logger.debug("GET %s -> HTTP %d", path, r.status_code)
        if r.status_code in (401, 403):
            raise ProviderConfigError(
                f"WordsAPI rejected the credentials (HTTP {r.status_code}); check WORDSAPI_KEY"
            )
        return r

    @staticmethod
    def _json(r: httpx.Response, model: type[BaseModel]) -> BaseModel:
        try:
            return model.model_validate(r.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise MalformedResponseError(f"unexpected payload from {r.request.url}: {e}") from e

    def _rhymes(self, word: str) -> list[str]:
        r = self._get(f"/words/{quote(word, safe='')}/rhymes")
        if r.status_code == 404:
            return []
        if r.status_code != 200:
            raise ProviderError(f"rhymes lookup failed: HTTP {r.status_code} :: {r.text}")

        payload = self._json(r, WordsApiRhymes)
        if "all" in payload.rhymes:
            return payload.rhymes["all"]
        return [w for words in payload.rhymes.values() for w in words]

    def fetch(self, word: str) -> dict:
        """Fetch `word`. Returns {"found": False} when WordsAPI does not know it."""
        word = word.strip()
        if not word:
            return {"found": False}

        r = self._get(f"/words/{quote(word, safe='')}")
        if r.status_code == 404:
            logger.info("%r not found", word)
            return {"found": False}
        if r.status_code != 200:
            raise ProviderError(f"lookup failed: HTTP {r.status_code} :: {r.text}")

        payload = self._json(r, WordsApiWord)
        meanings = [
            {
                "definition": res.definition,
                "synonyms": res.synonyms,
                "also": res.also,
                "antonyms": res.antonyms,
                "similarWords": res.similar_to,
            }
            for res in payload.results
        ]

        try:
            rhymes = self._rhymes(word)
        except ProviderConfigError:
            raise
        except ProviderError as e:
            logger.warning("rhymes for %r unavailable: %s", word, e)
            rhymes = []
        if rhymes:
            if meanings:
                meanings[0]["rhymes"] = rhymes
            else:
                meanings.append({"rhymes": rhymes})

        return {"found": True, "meanings": meanings}


@contextmanager
def open_provider(data_path: str | None = None) -> Iterator[LookupProvider]:
    """WordsAPI provider from settings, or an offline one from a JSON word file."""
    if data_path:
        yield InMemoryProvider.from_json(data_path)
        return

    with WordsApiProvider(load_settings()) as provider:
        yield provider
