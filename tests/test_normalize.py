"""Tests for turning raw provider responses into word records."""

import pytest

from wordfinder.core.errors import MalformedResponseError, ProviderError
from wordfinder.core.normalize import clean, flatten, normalize


# === Helpers ===

def test_flatten_nested():
    assert flatten(["a", ["b", ["c", ("d",)]], [], "e"]) == ["a", "b", "c", "d", "e"]


def test_clean_drops_empty_and_duplicates():
    assert clean(["run", None, "", "  ", ["jog", "run"], " jog "]) == frozenset({"run", "jog"})


# === Not found ===

def test_not_found_ignores_stray_meanings():
    raw = {
        "found": False,
        "meanings": [{"definition": "should not appear", "synonyms": ["x"]}],
    }
    record = normalize(raw, text="zzxyqq")

    assert record.found is False
    assert record.text == "zzxyqq"
    assert record.definitions == ()
    assert record.synonyms == record.antonyms == record.similar_words == record.rhymes == frozenset()


def test_not_found_never_reads_meanings():
    # garbage meanings must not be validated when found is false
    record = normalize({"found": False, "meanings": "not a list"})
    assert record.found is False


# === Found ===

def test_found_collects_definitions_in_order():
    raw = {
        "found": True,
        "meanings": [
            {"definition": "first sense"},
            {"synonyms": ["no definition here"]},
            {"definition": "second sense"},
            {"definition": "first sense"},
        ],
    }
    record = normalize(raw, text="word")

    assert record.found is True
    assert record.definitions == ("first sense", "second sense", "first sense")


def test_synonyms_merge_also_and_dedupe():
    raw = {
        "found": True,
        "meanings": [
            {"definition": "move fast", "synonyms": ["run", "jog"]},
            {"definition": "go", "synonyms": ["run"], "also": ["jog", None]},
        ],
    }
    record = normalize(raw, text="run")

    assert record.synonyms == {"run", "jog"}


def test_details_collected_across_meanings():
    raw = {
        "found": True,
        "meanings": [
            {"definition": "a", "antonyms": ["sad"], "similarWords": ["glad"], "rhymes": ["snappy"]},
            {"definition": "b", "antonyms": ["sad", "unhappy"], "similarWords": [["content"]], "rhymes": [""]},
        ],
    }
    record = normalize(raw, text="happy")

    assert record.antonyms == {"sad", "unhappy"}
    assert record.similar_words == {"glad", "content"}
    assert record.rhymes == {"snappy"}


def test_missing_fields_give_empty_sets():
    record = normalize({"found": True, "meanings": [{"definition": "only a definition"}]})

    assert record.definitions == ("only a definition",)
    assert record.synonyms == record.antonyms == record.similar_words == record.rhymes == frozenset()


def test_found_with_no_meanings():
    record = normalize({"found": True, "meanings": []}, text="odd")

    assert record.found is True
    assert record.definitions == ()


def test_found_with_meanings_key_missing():
    record = normalize({"found": True}, text="odd")

    assert record.found is True
    assert record.definitions == ()


def test_normalize_twice_is_stable():
    raw = {
        "found": True,
        "meanings": [{"definition": "x", "synonyms": ["b", "a", "b"], "rhymes": ["c", None]}],
    }
    first = normalize(raw, text="x")
    second = normalize(raw, text="x")

    assert first.synonyms == second.synonyms == {"a", "b"}
    assert first.rhymes == second.rhymes == {"c"}
    assert first == second


# === Malformed ===

@pytest.mark.parametrize("raw", [
    {},
    {"found": "yes"},
    ["found"],
    {"found": True, "meanings": "oops"},
    {"found": True, "meanings": ["not a mapping"]},
    {"found": True, "meanings": [{"synonyms": "run"}]},
])
def test_malformed_response(raw):
    with pytest.raises(MalformedResponseError):
        normalize(raw)


def test_malformed_is_provider_error():
    with pytest.raises(ProviderError):
        normalize({"found": None})
