# src/wordfinder/core/normalize.py
"""
Shape a provider's raw response into a WordRecord.

Raw shape:
    {
      "found": true,
      "meanings": [
        {"definition": "...", "synonyms": [...], "also": [...],
         "antonyms": [...], "similarWords": [...], "rhymes": [...]},
        ...
      ]
    }

Every field of a meaning is optional. Detail lists are merged across all
meanings, flattened, stripped of null/empty entries and deduplicated.
Definitions keep meaning order and are never deduplicated.
"""

import logging
from typing import Any, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wordfinder.core.errors import MalformedResponseError
from wordfinder.core.record import WordRecord

logger = logging.getLogger(__name__)


class RawMeaning(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    definition: str | None = None
    synonyms: list[Any] | None = None
    also: list[Any] | None = None
    antonyms: list[Any] | None = None
    similar_words: list[Any] | None = Field(default=None, alias="similarWords")
    rhymes: list[Any] | None = None


def flatten(values: Iterable[Any]) -> list[Any]:
    """Flatten arbitrarily nested lists/tuples into one level."""
    out = []
    stack = [iter(values)]
    while stack:
        for value in stack[-1]:
            if isinstance(value, (list, tuple)):
                stack.append(iter(value))
                break
            out.append(value)
        else:
            stack.pop()
    return out


def clean(values: Iterable[Any]) -> frozenset[str]:
    """Flatten, drop None / empty strings, deduplicate."""
    result = set()
    for value in flatten(values):
        if value is None:
            continue
        text = str(value).strip()
        if text:
            result.add(text)
    return frozenset(result)


def _parse_meanings(raw: Mapping[str, Any]) -> list[RawMeaning]:
    entries = raw.get("meanings") or []
    if not isinstance(entries, (list, tuple)):
        raise MalformedResponseError(f"meanings must be a list, got {type(entries).__name__}")

    meanings = []
    for i, entry in enumerate(entries):
        try:
            meanings.append(RawMeaning.model_validate(entry))
        except ValidationError as e:
            raise MalformedResponseError(f"meaning {i} is malformed: {e}") from e
    return meanings


def normalize(raw: Mapping[str, Any], text: str = "") -> WordRecord:
    """Turn one raw provider response into a WordRecord for `text`."""
    if not isinstance(raw, Mapping):
        raise MalformedResponseError(f"response must be an object, got {type(raw).__name__}")

    found = raw.get("found")
    if not isinstance(found, bool):
        raise MalformedResponseError("response is missing a boolean 'found' flag")

    if not found:
        return WordRecord.not_found(text)

    meanings = _parse_meanings(raw)
    if not meanings:
        logger.warning("provider reported %r as found but returned no meanings", text)

    definitions = []
    synonyms, antonyms, similar, rhymes = [], [], [], []
    for m in meanings:
        if m.definition is not None:
            definitions.append(m.definition)
        # "also" entries are near-synonyms too
        synonyms.extend(m.synonyms or [])
        synonyms.extend(m.also or [])
        antonyms.extend(m.antonyms or [])
        similar.extend(m.similar_words or [])
        rhymes.extend(m.rhymes or [])

    record = WordRecord(
        text=text,
        found=True,
        definitions=tuple(definitions),
        synonyms=clean(synonyms),
        antonyms=clean(antonyms),
        similar_words=clean(similar),
        rhymes=clean(rhymes),
    )
    logger.debug(
        "normalized %r: %d definitions, %d synonyms, %d antonyms, %d similar, %d rhymes",
        text, len(record.definitions), len(record.synonyms), len(record.antonyms),
        len(record.similar_words), len(record.rhymes),
    )
    return record
