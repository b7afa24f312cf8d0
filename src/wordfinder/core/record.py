# src/wordfinder/core/record.py
"""
Word record - the normalized result of one lookup.

"resilient" → definitions (ordered, one per sense)
            + synonyms / antonyms / similar words / rhymes (unordered sets)
"""

from dataclasses import dataclass, field
from enum import Enum


class DetailCategory(Enum):
    """Browsable detail categories, in menu order."""

    SYNONYMS = (1, "Synonyms", "synonyms")
    ANTONYMS = (2, "Antonyms", "antonyms")
    SIMILAR_WORDS = (3, "Similar Words", "similar_words")
    RHYMES = (4, "Rhymes", "rhymes")

    def __init__(self, index: int, label: str, attr: str):
        self.index = index
        self.label = label
        self.attr = attr

    @classmethod
    def from_index(cls, index: int) -> "DetailCategory":
        for category in cls:
            if category.index == index:
                return category
        raise ValueError(f"No detail category at position {index}")

    @classmethod
    def from_name(cls, name: str) -> "DetailCategory":
        """Match 'synonyms', 'similar-words', 'Similar Words', ..."""
        key = name.strip().lower().replace("-", " ").replace("_", " ")
        for category in cls:
            if category.label.lower() == key:
                return category
        raise ValueError(f"Unknown detail category: {name}")


class NextAction(Enum):
    """Options offered after a category has been shown."""

    MORE_DETAILS = (1, "See another category for this word")
    NEW_WORD = (2, "Look up a new word")
    EXIT = (3, "Exit")

    def __init__(self, index: int, label: str):
        self.index = index
        self.label = label

    @classmethod
    def from_index(cls, index: int) -> "NextAction":
        for action in cls:
            if action.index == index:
                return action
        raise ValueError(f"No action at position {index}")


@dataclass(frozen=True)
class WordRecord:
    text: str
    found: bool
    definitions: tuple[str, ...] = ()
    synonyms: frozenset[str] = field(default_factory=frozenset)
    antonyms: frozenset[str] = field(default_factory=frozenset)
    similar_words: frozenset[str] = field(default_factory=frozenset)
    rhymes: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def not_found(cls, text: str) -> "WordRecord":
        return cls(text=text, found=False)

    def details(self, category: DetailCategory) -> frozenset[str]:
        return getattr(self, category.attr)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "found": self.found,
            "definitions": list(self.definitions),
            "synonyms": sorted(self.synonyms),
            "antonyms": sorted(self.antonyms),
            "similar_words": sorted(self.similar_words),
            "rhymes": sorted(self.rhymes),
        }
