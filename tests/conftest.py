import io
import json

import pytest
from rich.console import Console

from wordfinder.core.provider import InMemoryProvider


WORDS = {
    "resilient": [
        {
            "definition": "recovering readily from adversity",
            "synonyms": ["buoyant", "live"],
            "similarWords": ["elastic"],
        },
        {
            "definition": "able to return to its original shape",
            "synonyms": ["springy", "buoyant"],
            "also": ["elastic"],
        },
    ],
    "happy": [
        {
            "definition": "enjoying or showing joy",
            "antonyms": ["unhappy"],
            "rhymes": ["snappy", "sappy"],
        },
    ],
}


@pytest.fixture
def provider():
    return InMemoryProvider(WORDS)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(WORDS), encoding="utf-8")
    return path


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, force_terminal=False, color_system=None)
