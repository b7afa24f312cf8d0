"""Tests for settings loading."""

import pytest

from wordfinder.core.config import DEFAULT_BASE_URL, DEFAULT_HOST, DEFAULT_TIMEOUT, load_settings
from wordfinder.core.errors import ProviderConfigError


def test_defaults():
    settings = load_settings({"WORDSAPI_KEY": "abc"})

    assert settings.api_key == "abc"
    assert settings.host == DEFAULT_HOST
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_overrides():
    settings = load_settings({
        "WORDSAPI_KEY": " abc ",
        "WORDSAPI_HOST": "words.example",
        "WORDSAPI_BASE_URL": "http://localhost:9000/",
        "WORDSAPI_TIMEOUT": "2.5",
    })

    assert settings.api_key == "abc"
    assert settings.host == "words.example"
    assert settings.base_url == "http://localhost:9000"
    assert settings.timeout == 2.5


def test_base_url_follows_host():
    settings = load_settings({"WORDSAPI_KEY": "abc", "WORDSAPI_HOST": "words.example"})
    assert settings.base_url == "https://words.example"


@pytest.mark.parametrize("env", [{}, {"WORDSAPI_KEY": ""}, {"WORDSAPI_KEY": "   "}])
def test_missing_key(env):
    with pytest.raises(ProviderConfigError):
        load_settings(env)


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_bad_timeout_falls_back(raw):
    settings = load_settings({"WORDSAPI_KEY": "abc", "WORDSAPI_TIMEOUT": raw})
    assert settings.timeout == DEFAULT_TIMEOUT


def test_reads_dotenv(tmp_path, monkeypatch):
    monkeypatch.delenv("WORDSAPI_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("WORDSAPI_KEY=from-dotenv\n", encoding="utf-8")

    try:
        settings = load_settings()
    finally:
        monkeypatch.delenv("WORDSAPI_KEY", raising=False)

    assert settings.api_key == "from-dotenv"
