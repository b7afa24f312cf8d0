# src/wordfinder/core/provider.py
"""
Lookup providers.

A provider turns a word into a raw response mapping:
    {"found": False}
    {"found": True, "meanings": [{"definition": ..., "synonyms": [...], ...}]}

Failures (network, auth, bad payload) raise ProviderError subclasses.
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

from wordfinder.core.errors import ProviderConfigError

logger = logging.getLogger(__name__)


class LookupProvider(Protocol):
    """Anything that can fetch raw lexical data for a word."""

    def fetch(self, word: str) -> dict[str, Any]:
        ...


class InMemoryProvider:
    """Provider backed by a dict of word → meanings. Lookup ignores case."""

    def __init__(self, entries: Mapping[str, list[dict]] | None = None):
        self.entries = {k.lower(): v for k, v in (entries or {}).items()}

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryProvider":
        """
        Load a word file:
            {"resilient": [{"definition": "...", "synonyms": [...]}], ...}
        """
        path = Path(path)
        if not path.exists():
            raise ProviderConfigError(f"Word data file not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ProviderConfigError(f"Could not read word data file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ProviderConfigError(f"Word data file {path} must hold a JSON object")

        logger.info("loaded %d words from %s", len(data), path)
        return cls(data)

    def add(self, word: str, meanings: list[dict]) -> None:
        self.entries[word.lower()] = meanings

    def fetch(self, word: str) -> dict[str, Any]:
        meanings = self.entries.get(word.strip().lower())
        if meanings is None:
            return {"found": False}
        return {"found": True, "meanings": meanings}
